"""Time utilities for database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def epoch_seconds(value: datetime) -> int:
    """Return whole seconds since the epoch, treating naive values as UTC.

    SQLite hands back naive datetimes even for timezone-aware columns.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())
