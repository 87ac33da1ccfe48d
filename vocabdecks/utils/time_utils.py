"""
Clock helpers.

All timestamps are timezone-aware UTC. Backends without native timezone
support (SQLite) hand values back naive; those are read as UTC.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime to aware UTC.

    Naive values are assumed to already be UTC and get the UTC offset attached.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Return "now", bumped past ``previous`` if the clock has not advanced.

    Used for ``updated_at`` columns, which must strictly increase on every write.
    """
    now = utcnow()
    previous = to_utc(previous)
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now
