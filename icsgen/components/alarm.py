"""VALARM component."""

from datetime import datetime, timedelta
from typing import ClassVar

from icsgen.component import Component
from icsgen.dates import format_datetime, format_duration
from icsgen.property_bag import PropertyBag
from icsgen.values import RawValue


class Alarm(Component):
    """A reminder attached to an event.

    A ``timedelta`` trigger is relative to the event start (or end, with
    ``trigger_related="END"``); a ``datetime`` trigger is absolute and written
    in UTC.
    """

    component_type: ClassVar[str] = "VALARM"

    action: str = "DISPLAY"
    trigger: timedelta | datetime | None = None
    trigger_related: str | None = None
    description: str | None = None
    summary: str | None = None
    repeat: int | None = None
    duration: timedelta | None = None
    attach: str | None = None

    def set_action(self, action: str) -> "Alarm":
        self.action = action
        return self

    def set_trigger(self, trigger: timedelta | datetime | None, related: str | None = None) -> "Alarm":
        self.trigger = trigger
        self.trigger_related = related
        return self

    def set_description(self, description: str | None) -> "Alarm":
        self.description = description
        return self

    def set_summary(self, summary: str | None) -> "Alarm":
        self.summary = summary
        return self

    def set_repeat(self, repeat: int | None, duration: timedelta | None) -> "Alarm":
        self.repeat = repeat
        self.duration = duration
        return self

    def set_attach(self, attach: str | None) -> "Alarm":
        self.attach = attach
        return self

    def build_properties(self) -> PropertyBag:
        bag = PropertyBag()
        bag.set("ACTION", self.action)

        if isinstance(self.trigger, datetime):
            bag.set("TRIGGER", RawValue(format_datetime(self.trigger)), {"VALUE": "DATE-TIME"})
        elif self.trigger is not None:
            params = {"RELATED": self.trigger_related} if self.trigger_related else None
            bag.set("TRIGGER", RawValue(format_duration(self.trigger)), params)

        if self.description:
            bag.set("DESCRIPTION", self.description)
        if self.summary:
            bag.set("SUMMARY", self.summary)
        if self.repeat is not None:
            bag.set("REPEAT", self.repeat)
        if self.duration is not None:
            bag.set("DURATION", RawValue(format_duration(self.duration)))
        if self.attach:
            bag.set("ATTACH", RawValue(self.attach))
        return bag
