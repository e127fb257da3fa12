"""RRULE values. Only the textual rule is produced; occurrences are never expanded."""

from datetime import date, datetime

from pydantic import BaseModel

from icsgen.dates import format_date, format_datetime
from icsgen.exceptions import InvalidArgumentError
from icsgen.values import RawValue


class RecurrenceRule(BaseModel):
    """A recurrence rule such as ``FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE``."""

    freq: str
    interval: int | None = None
    count: int | None = None
    until: datetime | date | None = None
    wkst: str | None = None
    by_second: list[int] | None = None
    by_minute: list[int] | None = None
    by_hour: list[int] | None = None
    by_day: list[str] | None = None
    by_month_day: list[int] | None = None
    by_year_day: list[int] | None = None
    by_week_no: list[int] | None = None
    by_month: list[int] | None = None
    by_set_pos: list[int] | None = None

    def __init__(self, **data):
        super().__init__(**data)
        self.check()

    def check(self) -> None:
        """Raise InvalidArgumentError for rules the format does not allow."""
        if not self.freq:
            raise InvalidArgumentError("RRULE requires FREQ")
        if self.count is not None and self.until is not None:
            raise InvalidArgumentError("RRULE cannot have both COUNT and UNTIL")

    def to_ical(self) -> str:
        parts = [f"FREQ={self.freq.upper()}"]
        if self.interval is not None:
            parts.append(f"INTERVAL={self.interval}")
        if self.count is not None:
            parts.append(f"COUNT={self.count}")
        if isinstance(self.until, datetime):
            parts.append(f"UNTIL={format_datetime(self.until)}")
        elif self.until is not None:
            parts.append(f"UNTIL={format_date(self.until)}")

        for key, values in (
            ("BYSECOND", self.by_second),
            ("BYMINUTE", self.by_minute),
            ("BYHOUR", self.by_hour),
            ("BYDAY", self.by_day),
            ("BYMONTHDAY", self.by_month_day),
            ("BYYEARDAY", self.by_year_day),
            ("BYWEEKNO", self.by_week_no),
            ("BYMONTH", self.by_month),
            ("BYSETPOS", self.by_set_pos),
        ):
            if values:
                parts.append(f"{key}={','.join(str(v).upper() for v in values)}")

        if self.wkst:
            parts.append(f"WKST={self.wkst.upper()}")
        return ";".join(parts)

    def to_value(self) -> RawValue:
        return RawValue(self.to_ical())
