"""Date and time formatting for property values."""

from datetime import date, datetime, timedelta, timezone

DATE_FORMAT = "%Y%m%d"
DATETIME_FORMAT = "%Y%m%dT%H%M%S"


def format_date(value: date) -> str:
    """Format as a DATE value, e.g. ``20250101``."""
    return value.strftime(DATE_FORMAT)


def format_datetime(value: datetime, use_utc: bool = True) -> str:
    """Format as a DATE-TIME value.

    With ``use_utc`` the value is converted to UTC and suffixed with ``Z``;
    naive datetimes are assumed to already be UTC. Without it the wall-clock
    time is written as-is (floating, or local to a ``TZID`` parameter).
    """
    if use_utc:
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(DATETIME_FORMAT) + "Z"
    return value.strftime(DATETIME_FORMAT)


def format_duration(value: timedelta) -> str:
    """Format as a DURATION value, e.g. ``PT15M``, ``-P1DT2H`` or ``P2W``."""
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    days = value.days
    seconds = value.seconds

    if days and not seconds and days % 7 == 0:
        return f"{sign}P{days // 7}W"

    out = f"{sign}P"
    if days:
        out += f"{days}D"
    if seconds or not days:
        hours, rest = divmod(seconds, 3600)
        minutes, secs = divmod(rest, 60)
        out += "T"
        if hours:
            out += f"{hours}H"
        if minutes:
            out += f"{minutes}M"
        if secs or not (hours or minutes):
            out += f"{secs}S"
    return out


def format_utc_offset(value: timedelta) -> str:
    """Format as a UTC-OFFSET value, e.g. ``+0100`` or ``-0530``."""
    sign = "-" if value < timedelta(0) else "+"
    total = int(abs(value).total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    out = f"{sign}{hours:02d}{minutes:02d}"
    if secs:
        out += f"{secs:02d}"
    return out
