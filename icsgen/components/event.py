"""VEVENT component."""

import uuid
from datetime import date, datetime, timedelta, timezone as dt_timezone
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from icsgen.component import Component
from icsgen.components.alarm import Alarm
from icsgen.dates import format_date, format_datetime, format_duration
from icsgen.property_bag import PropertyBag, validate_name
from icsgen.recurrence import RecurrenceRule
from icsgen.values import ListValue, RawValue


class EventStatus(str, Enum):
    """Event status values (RFC 5545 section 3.8.1.11)."""

    TENTATIVE = "TENTATIVE"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class Transparency(str, Enum):
    """Time transparency values (RFC 5545 section 3.8.2.7)."""

    OPAQUE = "OPAQUE"
    TRANSPARENT = "TRANSPARENT"


class Organizer(BaseModel):
    """Calendar user organizing an event."""

    email: str
    name: str | None = None

    def params(self) -> dict[str, str]:
        return {"CN": self.name} if self.name else {}

    def to_value(self) -> RawValue:
        return RawValue(f"mailto:{self.email}")


class Attendee(BaseModel):
    """Calendar user attending an event."""

    email: str
    name: str | None = None
    role: str | None = None
    partstat: str | None = None
    rsvp: bool | None = None
    cutype: str | None = None

    def params(self) -> dict[str, str]:
        params = {}
        if self.cutype:
            params["CUTYPE"] = self.cutype
        if self.role:
            params["ROLE"] = self.role
        if self.partstat:
            params["PARTSTAT"] = self.partstat
        if self.rsvp is not None:
            params["RSVP"] = "TRUE" if self.rsvp else "FALSE"
        if self.name:
            params["CN"] = self.name
        return params

    def to_value(self) -> RawValue:
        return RawValue(f"mailto:{self.email}")


def _utcnow() -> datetime:
    return datetime.now(dt_timezone.utc)


def _new_uid() -> str:
    return str(uuid.uuid4())


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


class Event(Component):
    """A scheduled event.

    ``uid`` and ``dt_stamp`` are fixed when the event is created so repeated
    renders produce identical output.

    Timed values are written in UTC by default. With ``use_timezone`` they are
    written as wall-clock time with a ``TZID`` parameter naming ``timezone``;
    with ``use_utc=False`` and no timezone they are floating. All-day events
    (``no_time``) use ``VALUE=DATE`` and treat ``dt_end`` as the last day of
    the event, writing the exclusive end date the format expects.
    """

    component_type: ClassVar[str] = "VEVENT"

    uid: str = Field(default_factory=_new_uid)
    dt_stamp: datetime = Field(default_factory=_utcnow)
    dt_start: datetime | date | None = None
    dt_end: datetime | date | None = None
    duration: timedelta | None = None
    no_time: bool = False
    use_utc: bool = True
    use_timezone: bool = False
    timezone: str | None = None

    summary: str | None = None
    description: str | None = None
    location: str | None = None
    location_title: str | None = None
    geo: tuple[float, float] | None = None
    url: str | None = None
    organizer: Organizer | None = None
    attendees: list[Attendee] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    status: str | None = None
    transparency: str | None = None
    sequence: int | None = None
    created: datetime | None = None
    last_modified: datetime | None = None
    recurrence_rule: RecurrenceRule | None = None
    exdates: list[datetime | date] = Field(default_factory=list)
    recurrence_id: datetime | date | None = None
    cancelled: bool = False
    x_properties: dict[str, str] = Field(default_factory=dict)

    @field_validator("x_properties")
    @classmethod
    def check_x_property_names(cls, v: dict[str, str]) -> dict[str, str]:
        for name in v:
            validate_name(name)
        return v

    def set_uid(self, uid: str) -> "Event":
        self.uid = uid
        return self

    def set_dt_stamp(self, dt_stamp: datetime) -> "Event":
        self.dt_stamp = dt_stamp
        return self

    def set_dt_start(self, dt_start: datetime | date | None) -> "Event":
        self.dt_start = dt_start
        return self

    def set_dt_end(self, dt_end: datetime | date | None) -> "Event":
        self.dt_end = dt_end
        return self

    def set_duration(self, duration: timedelta | None) -> "Event":
        self.duration = duration
        return self

    def set_no_time(self, no_time: bool) -> "Event":
        self.no_time = no_time
        return self

    def set_use_utc(self, use_utc: bool) -> "Event":
        self.use_utc = use_utc
        return self

    def set_use_timezone(self, use_timezone: bool) -> "Event":
        self.use_timezone = use_timezone
        return self

    def set_timezone(self, timezone: str | None) -> "Event":
        self.timezone = timezone
        return self

    def set_summary(self, summary: str | None) -> "Event":
        self.summary = summary
        return self

    def set_description(self, description: str | None) -> "Event":
        self.description = description
        return self

    def set_location(
        self,
        location: str | None,
        title: str | None = None,
        geo: tuple[float, float] | None = None,
    ) -> "Event":
        self.location = location
        self.location_title = title
        self.geo = geo
        return self

    def set_url(self, url: str | None) -> "Event":
        self.url = url
        return self

    def set_organizer(self, organizer: Organizer | None) -> "Event":
        self.organizer = organizer
        return self

    def add_attendee(self, attendee: Attendee) -> "Event":
        self.attendees = [*self.attendees, attendee]
        return self

    def set_categories(self, categories: list[str]) -> "Event":
        self.categories = categories
        return self

    def add_category(self, category: str) -> "Event":
        self.categories = [*self.categories, category]
        return self

    def set_status(self, status: str | None) -> "Event":
        self.status = status
        return self

    def set_transparency(self, transparency: str | None) -> "Event":
        self.transparency = transparency
        return self

    def set_sequence(self, sequence: int | None) -> "Event":
        self.sequence = sequence
        return self

    def set_created(self, created: datetime | None) -> "Event":
        self.created = created
        return self

    def set_last_modified(self, last_modified: datetime | None) -> "Event":
        self.last_modified = last_modified
        return self

    def set_recurrence_rule(self, rule: RecurrenceRule | None) -> "Event":
        self.recurrence_rule = rule
        return self

    def add_exdate(self, exdate: datetime | date) -> "Event":
        self.exdates = [*self.exdates, exdate]
        return self

    def set_recurrence_id(self, recurrence_id: datetime | date | None) -> "Event":
        self.recurrence_id = recurrence_id
        return self

    def set_cancelled(self, cancelled: bool) -> "Event":
        self.cancelled = cancelled
        return self

    def set_x_property(self, name: str, value: str) -> "Event":
        validate_name(name)
        self.x_properties = {**self.x_properties, name: value}
        return self

    def add_alarm(self, alarm: Alarm) -> "Event":
        return self.add_component(alarm)

    def _format_moment(self, value: datetime | date) -> tuple[str, dict[str, str] | None]:
        """Return the rendered value and parameters for a DATE or DATE-TIME."""
        if self.no_time or not isinstance(value, datetime):
            return format_date(_as_date(value)), {"VALUE": "DATE"}
        if self.use_timezone and self.timezone:
            return format_datetime(value, use_utc=False), {"TZID": self.timezone}
        return format_datetime(value, use_utc=self.use_utc), None

    def _set_moment(self, bag: PropertyBag, name: str, value: datetime | date) -> None:
        rendered, params = self._format_moment(value)
        bag.set(name, RawValue(rendered), params)

    def build_properties(self) -> PropertyBag:
        bag = PropertyBag()
        bag.set("UID", self.uid)
        bag.set("DTSTAMP", RawValue(format_datetime(self.dt_stamp)))

        if self.dt_start is not None:
            self._set_moment(bag, "DTSTART", self.dt_start)

        if self.no_time and self.dt_start is not None:
            # all-day end dates are exclusive
            last_day = _as_date(self.dt_end if self.dt_end is not None else self.dt_start)
            self._set_moment(bag, "DTEND", last_day + timedelta(days=1))
        elif self.dt_end is not None:
            self._set_moment(bag, "DTEND", self.dt_end)
        elif self.duration is not None:
            bag.set("DURATION", RawValue(format_duration(self.duration)))

        if self.summary:
            bag.set("SUMMARY", self.summary)
        if self.description:
            bag.set("DESCRIPTION", self.description)

        if self.location:
            bag.set("LOCATION", self.location)
        if self.geo is not None:
            # FLOAT values cannot use exponent notation
            lat, lon = f"{self.geo[0]:.6f}", f"{self.geo[1]:.6f}"
            bag.set("GEO", RawValue(f"{lat};{lon}"))
            if self.location and self.location_title:
                bag.set(
                    "X-APPLE-STRUCTURED-LOCATION",
                    RawValue(f"geo:{lat},{lon}"),
                    {
                        "VALUE": "URI",
                        "X-ADDRESS": self.location,
                        "X-APPLE-RADIUS": "49",
                        "X-TITLE": self.location_title,
                    },
                )

        if self.url:
            bag.set("URL", RawValue(self.url))
        if self.organizer:
            bag.set("ORGANIZER", self.organizer.to_value(), self.organizer.params())
        for attendee in self.attendees:
            bag.add("ATTENDEE", attendee.to_value(), attendee.params())
        if self.categories:
            bag.set("CATEGORIES", ListValue(self.categories))

        if self.cancelled:
            bag.set("STATUS", EventStatus.CANCELLED)
        elif self.status:
            bag.set("STATUS", self.status)
        if self.transparency:
            bag.set("TRANSP", self.transparency)
        if self.sequence is not None:
            bag.set("SEQUENCE", self.sequence)
        if self.created:
            bag.set("CREATED", RawValue(format_datetime(self.created)))
        if self.last_modified:
            bag.set("LAST-MODIFIED", RawValue(format_datetime(self.last_modified)))

        if self.recurrence_rule:
            bag.set("RRULE", self.recurrence_rule.to_value())
        if self.exdates:
            # EXDATE parameters apply to the whole line, so DATE and DATE-TIME
            # entries go on separate lines
            groups: dict[tuple, tuple[dict[str, str] | None, list[RawValue]]] = {}
            for exdate in self.exdates:
                value, params = self._format_moment(exdate)
                key = tuple(sorted((params or {}).items()))
                groups.setdefault(key, (params, []))[1].append(RawValue(value))
            for params, values in groups.values():
                bag.add("EXDATE", ListValue(values), params)
        if self.recurrence_id is not None:
            self._set_moment(bag, "RECURRENCE-ID", self.recurrence_id)

        for name, value in self.x_properties.items():
            bag.set(name, value)

        return bag
