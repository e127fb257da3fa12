"""JSON calendar descriptions and their conversion to component trees.

Accepted shapes:
- Array of events: ``[{event1}, {event2}, ...]``
- Object with calendar fields and an ``events`` key: ``{name, timezone, events: [...]}``
"""

import json
import logging
from datetime import date, datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from icsgen.components import Alarm, Attendee, Calendar, Event, Organizer
from icsgen.exceptions import DocumentError
from icsgen.recurrence import RecurrenceRule

logger = logging.getLogger(__name__)


class AlarmDocument(BaseModel):
    """Reminder relative to the event start."""

    minutes_before: int = 15
    description: str | None = None

    def to_component(self, event_summary: str | None) -> Alarm:
        return Alarm(
            trigger=timedelta(minutes=-self.minutes_before),
            description=self.description or event_summary or "Reminder",
        )


class EventDocument(BaseModel):
    """One event as described in JSON."""

    summary: str
    start: datetime | date
    end: datetime | date | None = None
    all_day: bool = False
    uid: str | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None
    categories: list[str] = []
    status: str | None = None
    organizer: Organizer | None = None
    attendees: list[Attendee] = []
    rrule: RecurrenceRule | None = None
    alarms: list[AlarmDocument] = []

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_moment(cls, v):
        """Parse ISO strings; a bare YYYY-MM-DD is a date, anything longer a datetime."""
        if isinstance(v, str):
            if len(v) == 10:
                return date.fromisoformat(v)
            return datetime.fromisoformat(v)
        return v

    @model_validator(mode="after")
    def validate_dates(self):
        """Validate date order and the recurrence rule."""
        if self.end is not None and _sort_key(self.end) < _sort_key(self.start):
            raise ValueError("end must be >= start")
        if self.rrule is not None:
            self.rrule.check()
        return self

    def to_component(self, timezone: str | None = None) -> Event:
        # a plain date start means an all-day event
        all_day = self.all_day or not isinstance(self.start, datetime)
        event = Event(
            dt_start=self.start,
            dt_end=self.end,
            no_time=all_day,
            summary=self.summary,
            description=self.description,
            location=self.location,
            url=self.url,
            categories=self.categories,
            status=self.status,
            organizer=self.organizer,
            attendees=self.attendees,
            recurrence_rule=self.rrule,
        )
        if self.uid:
            event.set_uid(self.uid)
        if timezone and not all_day and _is_naive(self.start):
            event.set_timezone(timezone).set_use_timezone(True)
        for alarm in self.alarms:
            event.add_alarm(alarm.to_component(self.summary))
        return event


class CalendarDocument(BaseModel):
    """Calendar-level fields plus its events."""

    prod_id: str | None = None
    name: str | None = None
    description: str | None = None
    method: str | None = None
    timezone: str | None = None
    calendar_scale: str | None = None
    events: list[EventDocument] = []

    def to_component(self, default_prod_id: str, default_timezone: str | None = None) -> Calendar:
        """Build the component tree; ``prod_id`` in the document wins over the default."""
        timezone = self.timezone or default_timezone
        calendar = (
            Calendar(self.prod_id if self.prod_id is not None else default_prod_id)
            .set_name(self.name)
            .set_description(self.description)
            .set_method(self.method)
            .set_calendar_scale(self.calendar_scale)
            .set_timezone(timezone)
        )
        for event_doc in self.events:
            calendar.add_event(event_doc.to_component(timezone))
        logger.info(f"Built calendar with {len(self.events)} events")
        return calendar


def _sort_key(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.combine(value, datetime.min.time())


def _is_naive(value: datetime | date) -> bool:
    return isinstance(value, datetime) and value.tzinfo is None


def parse_document(data: dict | list) -> CalendarDocument:
    """Validate already-decoded JSON into a :class:`CalendarDocument`."""
    try:
        if isinstance(data, list):
            return CalendarDocument(events=data)
        if isinstance(data, dict):
            return CalendarDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentError(f"Invalid calendar description: {e}") from e

    raise DocumentError(
        "JSON format not recognized. Expected array of events "
        "or object with an 'events' key."
    )


def load_document(path: Path) -> CalendarDocument:
    """Read and validate a JSON calendar description."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DocumentError(f"Failed to read JSON file: {e}") from e

    return parse_document(data)
