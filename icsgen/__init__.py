"""RFC 5545 calendar document generation."""

from icsgen.component import Component
from icsgen.components import (
    Alarm,
    Attendee,
    Calendar,
    CalendarMethod,
    CalendarScale,
    Event,
    EventStatus,
    Organizer,
    Timezone,
    TimezoneRule,
    Transparency,
)
from icsgen.exceptions import (
    DocumentError,
    IcsError,
    InvalidArgumentError,
    InvalidPropertyError,
)
from icsgen.folding import LineFolder, fold_line
from icsgen.property_bag import Property, PropertyBag
from icsgen.recurrence import RecurrenceRule
from icsgen.renderer import Renderer
from icsgen.values import ListValue, RawValue, TextValue

__all__ = [
    "Alarm",
    "Attendee",
    "Calendar",
    "CalendarMethod",
    "CalendarScale",
    "Component",
    "DocumentError",
    "Event",
    "EventStatus",
    "IcsError",
    "InvalidArgumentError",
    "InvalidPropertyError",
    "LineFolder",
    "ListValue",
    "Organizer",
    "Property",
    "PropertyBag",
    "RawValue",
    "RecurrenceRule",
    "Renderer",
    "TextValue",
    "Timezone",
    "TimezoneRule",
    "Transparency",
    "fold_line",
]
