"""UTC datetime helpers.

Task timestamps, due dates and analytics windows are all timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a datetime read from or written to the database to aware UTC.

    None passes through. Naive values (e.g. SQLite drops the offset) are
    taken to already be UTC; aware values are converted.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
