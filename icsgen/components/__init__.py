"""Concrete calendar components."""

from icsgen.components.alarm import Alarm
from icsgen.components.calendar import Calendar, CalendarMethod, CalendarScale
from icsgen.components.event import Attendee, Event, EventStatus, Organizer, Transparency
from icsgen.components.timezone import DAYLIGHT, STANDARD, Timezone, TimezoneRule

__all__ = [
    "Alarm",
    "Attendee",
    "Calendar",
    "CalendarMethod",
    "CalendarScale",
    "DAYLIGHT",
    "Event",
    "EventStatus",
    "Organizer",
    "STANDARD",
    "Timezone",
    "TimezoneRule",
    "Transparency",
]
