"""VCALENDAR component."""

from enum import Enum
from typing import ClassVar

from pydantic import Field

from icsgen.component import Component
from icsgen.components.timezone import Timezone
from icsgen.exceptions import InvalidArgumentError
from icsgen.property_bag import PropertyBag


class CalendarMethod(str, Enum):
    """iTIP methods (RFC 5546 section 1.4)."""

    PUBLISH = "PUBLISH"
    REQUEST = "REQUEST"
    REPLY = "REPLY"
    ADD = "ADD"
    CANCEL = "CANCEL"
    REFRESH = "REFRESH"
    COUNTER = "COUNTER"
    DECLINECOUNTER = "DECLINECOUNTER"


class CalendarScale(str, Enum):
    """Calendar scales (RFC 5545 section 3.7.1)."""

    GREGORIAN = "GREGORIAN"


class Calendar(Component):
    """Top-level calendar object.

    ``VERSION`` and ``PRODID`` are always written. Method and calendar scale
    are not checked against :class:`CalendarMethod` or :class:`CalendarScale`;
    any string is accepted.

    Setting a timezone writes ``X-WR-TIMEZONE`` and renders a matching
    ``VTIMEZONE`` before the explicit children, unless one with the same TZID
    was added explicitly.
    """

    component_type: ClassVar[str] = "VCALENDAR"

    prod_id: str = Field(frozen=True)
    method: str | None = None
    name: str | None = None
    description: str | None = None
    timezone: str | None = None
    calendar_scale: str | None = None

    def __init__(self, prod_id: str, **data):
        if not prod_id:
            raise InvalidArgumentError("PRODID cannot be empty")
        super().__init__(prod_id=prod_id, **data)

    def set_method(self, method: str | None) -> "Calendar":
        self.method = method
        return self

    def set_name(self, name: str | None) -> "Calendar":
        self.name = name
        return self

    def set_description(self, description: str | None) -> "Calendar":
        self.description = description
        return self

    def set_timezone(self, timezone: str | None) -> "Calendar":
        self.timezone = timezone
        return self

    def set_calendar_scale(self, calendar_scale: str | None) -> "Calendar":
        self.calendar_scale = calendar_scale
        return self

    def add_event(self, event: Component) -> "Calendar":
        """Append an event; same as :meth:`add_component`."""
        return self.add_component(event)

    def build_properties(self) -> PropertyBag:
        bag = PropertyBag()
        bag.set("VERSION", "2.0")
        bag.set("PRODID", self.prod_id)

        if self.method:
            bag.set("METHOD", self.method)
        if self.calendar_scale:
            bag.set("CALSCALE", self.calendar_scale)
        if self.name:
            bag.set("X-WR-CALNAME", self.name)
        if self.description:
            bag.set("X-WR-CALDESC", self.description)
        if self.timezone:
            bag.set("X-WR-TIMEZONE", self.timezone)

        return bag

    def derived_components(self) -> list[Component]:
        if not self.timezone:
            return []
        for child in self._components:
            if isinstance(child, Timezone) and child.tzid == self.timezone:
                return []
        return [Timezone(self.timezone)]
