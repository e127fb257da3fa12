"""Tests for JSON calendar descriptions."""

import json
from datetime import date, datetime

import pytest

from icsgen.document import CalendarDocument, EventDocument, load_document, parse_document
from icsgen.exceptions import DocumentError


def test_parse_array_of_events():
    """Test the bare array shape."""
    document = parse_document(
        [
            {"summary": "A", "start": "2025-01-02T09:00:00"},
            {"summary": "B", "start": "2025-01-03"},
        ]
    )

    assert [event.summary for event in document.events] == ["A", "B"]
    assert document.events[0].start == datetime(2025, 1, 2, 9, 0)
    assert document.events[1].start == date(2025, 1, 3)
    assert document.prod_id is None


def test_parse_object_with_events():
    """Test the object shape with calendar fields."""
    document = parse_document(
        {
            "prod_id": "-//Doc//EN",
            "name": "Work",
            "method": "PUBLISH",
            "events": [{"summary": "A", "start": "2025-01-02T09:00:00"}],
        }
    )

    assert document.prod_id == "-//Doc//EN"
    assert document.name == "Work"
    assert len(document.events) == 1


@pytest.mark.parametrize("data", ["not json shape", 42, None])
def test_unrecognized_shape(data):
    """Test that other JSON values are rejected."""
    with pytest.raises(DocumentError, match="not recognized"):
        parse_document(data)


def test_missing_summary_rejected():
    """Test that validation errors become DocumentError."""
    with pytest.raises(DocumentError, match="Invalid calendar description"):
        parse_document([{"start": "2025-01-02"}])


def test_end_before_start_rejected():
    """Test date order validation."""
    with pytest.raises(DocumentError):
        parse_document([{"summary": "A", "start": "2025-01-02", "end": "2025-01-01"}])


def test_rrule_count_and_until_rejected():
    """Test that nested recurrence rules are checked."""
    with pytest.raises(DocumentError):
        parse_document(
            [
                {
                    "summary": "A",
                    "start": "2025-01-02T09:00:00",
                    "rrule": {"freq": "DAILY", "count": 3, "until": "2025-02-01"},
                }
            ]
        )


def test_date_start_is_all_day():
    """Test that a plain date start produces an all-day event."""
    event = EventDocument(summary="Holiday", start="2025-12-25").to_component()
    lines = event.build_properties().render()

    assert "DTSTART;VALUE=DATE:20251225" in lines
    assert "DTEND;VALUE=DATE:20251226" in lines


def test_document_timezone_applied_to_naive_times():
    """Test that the calendar timezone becomes TZID on local event times."""
    document = parse_document(
        {
            "timezone": "Europe/Berlin",
            "events": [{"uid": "e1", "summary": "A", "start": "2025-01-02T09:00:00"}],
        }
    )
    text = document.to_component("-//Default//EN").render()

    assert "PRODID:-//Default//EN\r\n" in text
    assert "X-WR-TIMEZONE:Europe/Berlin\r\n" in text
    assert "TZID:Europe/Berlin\r\n" in text
    assert "DTSTART;TZID=Europe/Berlin:20250102T090000\r\n" in text
    assert "UID:e1\r\n" in text


def test_default_timezone_used_when_document_has_none():
    """Test the configured default timezone."""
    document = parse_document([{"summary": "A", "start": "2025-01-02T09:00:00"}])
    calendar = document.to_component("-//Default//EN", "America/New_York")

    assert calendar.timezone == "America/New_York"


def test_document_prod_id_wins_over_default():
    """Test that the document product identifier takes precedence."""
    document = CalendarDocument(prod_id="-//Doc//EN")

    assert document.to_component("-//Default//EN").prod_id == "-//Doc//EN"


def test_event_fields_carried_over():
    """Test that event details reach the component."""
    document = parse_document(
        [
            {
                "summary": "Review",
                "start": "2025-01-02T09:00:00",
                "end": "2025-01-02T10:00:00",
                "location": "Room 4",
                "categories": ["Work"],
                "organizer": {"email": "boss@example.com", "name": "Boss"},
                "attendees": [{"email": "a@example.com"}],
                "rrule": {"freq": "WEEKLY", "count": 4},
                "alarms": [{"minutes_before": 10}],
            }
        ]
    )
    text = document.to_component("-//Test//EN").render()

    assert "LOCATION:Room 4\r\n" in text
    assert "CATEGORIES:Work\r\n" in text
    assert "ORGANIZER;CN=Boss:mailto:boss@example.com\r\n" in text
    assert "ATTENDEE:mailto:a@example.com\r\n" in text
    assert "RRULE:FREQ=WEEKLY;COUNT=4\r\n" in text
    assert "TRIGGER:-PT10M\r\n" in text
    assert "DESCRIPTION:Review\r\n" in text


def test_load_document(tmp_path):
    """Test reading a JSON file from disk."""
    path = tmp_path / "calendar.json"
    path.write_text(json.dumps([{"summary": "A", "start": "2025-01-02"}]))

    assert load_document(path).events[0].summary == "A"


def test_load_document_missing_file(tmp_path):
    """Test that a missing file raises DocumentError."""
    with pytest.raises(DocumentError, match="Failed to read JSON file"):
        load_document(tmp_path / "missing.json")


def test_load_document_bad_json(tmp_path):
    """Test that malformed JSON raises DocumentError."""
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    with pytest.raises(DocumentError, match="Failed to read JSON file"):
        load_document(path)
