from datetime import datetime, timezone

import pytest

from icsgen import Event


@pytest.fixture
def stamp():
    """Fixed DTSTAMP so rendered events are reproducible."""
    return datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_event(stamp):
    """Factory for events with a fixed UID and DTSTAMP."""

    def _make(uid: str = "event-1", **fields) -> Event:
        return Event(uid=uid, dt_stamp=stamp, **fields)

    return _make
