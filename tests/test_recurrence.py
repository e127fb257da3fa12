"""Tests for recurrence rules and date formatting."""

from datetime import date, datetime, timedelta, timezone

import pytest

from icsgen.dates import format_date, format_datetime, format_duration, format_utc_offset
from icsgen.exceptions import InvalidArgumentError
from icsgen.recurrence import RecurrenceRule
from icsgen.values import RawValue


def test_rrule_basic():
    """Test FREQ and INTERVAL with BYDAY."""
    rule = RecurrenceRule(freq="weekly", interval=2, by_day=["mo", "we"])

    assert rule.to_ical() == "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE"
    assert rule.to_value() == RawValue("FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE")


def test_rrule_until_date_and_datetime():
    """Test UNTIL with DATE and DATE-TIME values."""
    assert RecurrenceRule(freq="DAILY", until=date(2025, 12, 31)).to_ical() == (
        "FREQ=DAILY;UNTIL=20251231"
    )
    assert RecurrenceRule(
        freq="DAILY", until=datetime(2025, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
    ).to_ical() == "FREQ=DAILY;UNTIL=20251231T235959Z"


def test_rrule_all_parts_in_order():
    """Test the order of every supported rule part."""
    rule = RecurrenceRule(
        freq="YEARLY",
        count=5,
        by_second=[0],
        by_minute=[30],
        by_hour=[9, 17],
        by_day=["1MO"],
        by_month_day=[1, -1],
        by_year_day=[100],
        by_week_no=[20],
        by_month=[1, 6],
        by_set_pos=[-1],
        wkst="su",
    )

    assert rule.to_ical() == (
        "FREQ=YEARLY;COUNT=5;BYSECOND=0;BYMINUTE=30;BYHOUR=9,17;BYDAY=1MO;"
        "BYMONTHDAY=1,-1;BYYEARDAY=100;BYWEEKNO=20;BYMONTH=1,6;BYSETPOS=-1;WKST=SU"
    )


def test_rrule_count_and_until_exclusive():
    """Test that COUNT and UNTIL cannot be combined."""
    with pytest.raises(InvalidArgumentError):
        RecurrenceRule(freq="DAILY", count=3, until=date(2025, 1, 1))


def test_rrule_requires_freq():
    """Test that FREQ is required."""
    with pytest.raises(InvalidArgumentError):
        RecurrenceRule(freq="")


def test_format_date():
    """Test DATE formatting."""
    assert format_date(date(2025, 1, 2)) == "20250102"


def test_format_datetime():
    """Test UTC, converted and floating DATE-TIME formatting."""
    naive = datetime(2025, 1, 2, 3, 4, 5)
    aware = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=-5)))

    assert format_datetime(naive) == "20250102T030405Z"
    assert format_datetime(aware) == "20250102T080405Z"
    assert format_datetime(naive, use_utc=False) == "20250102T030405"


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(0), "PT0S"),
        (timedelta(minutes=15), "PT15M"),
        (timedelta(minutes=-15), "-PT15M"),
        (timedelta(hours=1, minutes=30), "PT1H30M"),
        (timedelta(seconds=45), "PT45S"),
        (timedelta(days=1), "P1D"),
        (timedelta(days=1, hours=2), "P1DT2H"),
        (timedelta(days=14), "P2W"),
        (timedelta(days=-7), "-P1W"),
    ],
)
def test_format_duration(value, expected):
    """Test DURATION formatting."""
    assert format_duration(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(hours=1), "+0100"),
        (timedelta(0), "+0000"),
        (timedelta(hours=-5, minutes=-30), "-0530"),
        (timedelta(hours=5, minutes=45), "+0545"),
        (timedelta(hours=1, seconds=30), "+010030"),
    ],
)
def test_format_utc_offset(value, expected):
    """Test UTC-OFFSET formatting."""
    assert format_utc_offset(value) == expected
