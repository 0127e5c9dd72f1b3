"""Utilities for timezone-aware timestamps."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(UTC)


def from_unix_millis(value: int) -> datetime:
    """Convert Unix epoch milliseconds to a timezone-aware UTC timestamp.

    Raises OverflowError when the value is outside the representable range.
    """
    return EPOCH + timedelta(milliseconds=value)


def to_unix_millis(value: datetime) -> int:
    """Convert a timestamp to Unix epoch milliseconds (naive values are taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - EPOCH) // timedelta(milliseconds=1)
