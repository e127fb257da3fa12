"""VTIMEZONE and its STANDARD / DAYLIGHT sub-components.

Rules are written exactly as configured; no timezone database is consulted.
"""

from datetime import datetime, timedelta
from typing import ClassVar

from pydantic import Field

from icsgen.component import Component
from icsgen.dates import format_datetime, format_utc_offset
from icsgen.exceptions import InvalidArgumentError
from icsgen.property_bag import PropertyBag
from icsgen.recurrence import RecurrenceRule
from icsgen.values import RawValue

STANDARD = "STANDARD"
DAYLIGHT = "DAYLIGHT"


def _offset_value(offset: timedelta | str) -> RawValue:
    if isinstance(offset, timedelta):
        return RawValue(format_utc_offset(offset))
    return RawValue(offset)


class TimezoneRule(Component):
    """One observance of a timezone, either ``STANDARD`` or ``DAYLIGHT``."""

    kind: str = Field(default=STANDARD, frozen=True)
    dt_start: datetime | None = None
    tz_offset_from: timedelta | str | None = None
    tz_offset_to: timedelta | str | None = None
    tz_name: str | None = None
    recurrence_rule: RecurrenceRule | None = None

    def __init__(self, kind: str = STANDARD, **data):
        kind = kind.upper() if isinstance(kind, str) else kind
        if kind not in (STANDARD, DAYLIGHT):
            raise InvalidArgumentError(
                f"Timezone rule must be {STANDARD} or {DAYLIGHT}, got {kind!r}"
            )
        super().__init__(kind=kind, **data)

    @property
    def component_type(self) -> str:
        return self.kind

    def set_dt_start(self, dt_start: datetime | None) -> "TimezoneRule":
        self.dt_start = dt_start
        return self

    def set_tz_offset_from(self, offset: timedelta | str | None) -> "TimezoneRule":
        self.tz_offset_from = offset
        return self

    def set_tz_offset_to(self, offset: timedelta | str | None) -> "TimezoneRule":
        self.tz_offset_to = offset
        return self

    def set_tz_name(self, tz_name: str | None) -> "TimezoneRule":
        self.tz_name = tz_name
        return self

    def set_recurrence_rule(self, rule: RecurrenceRule | None) -> "TimezoneRule":
        self.recurrence_rule = rule
        return self

    def build_properties(self) -> PropertyBag:
        bag = PropertyBag()
        if self.dt_start:
            # observance onsets are local wall-clock time
            bag.set("DTSTART", RawValue(format_datetime(self.dt_start, use_utc=False)))
        if self.tz_offset_from is not None:
            bag.set("TZOFFSETFROM", _offset_value(self.tz_offset_from))
        if self.tz_offset_to is not None:
            bag.set("TZOFFSETTO", _offset_value(self.tz_offset_to))
        if self.tz_name:
            bag.set("TZNAME", self.tz_name)
        if self.recurrence_rule:
            bag.set("RRULE", self.recurrence_rule.to_value())
        return bag


class Timezone(Component):
    """A ``VTIMEZONE`` identified by ``tzid``."""

    component_type: ClassVar[str] = "VTIMEZONE"

    tzid: str = Field(frozen=True)
    tz_url: str | None = None
    last_modified: datetime | None = None

    def __init__(self, tzid: str, **data):
        if not tzid:
            raise InvalidArgumentError("TZID cannot be empty")
        super().__init__(tzid=tzid, **data)

    def add_rule(self, rule: TimezoneRule) -> "Timezone":
        return self.add_component(rule)

    def build_properties(self) -> PropertyBag:
        bag = PropertyBag()
        bag.set("TZID", self.tzid)
        if self.tz_url:
            bag.set("TZURL", RawValue(self.tz_url))
        if self.last_modified:
            bag.set("LAST-MODIFIED", RawValue(format_datetime(self.last_modified)))
        return bag
