"""ISO 8601 datetime conversion utilities.

This module centralizes all transformations between Python datetime objects,
ISO 8601 strings and Unix timestamps. All time operations should use these
functions to ensure consistency.
"""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Get current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string with milliseconds."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 UTC timestamp string to datetime."""
    return datetime.fromisoformat(timestamp.replace('Z', '+00:00'))


def now() -> str:
    """Get current UTC timestamp as ISO 8601 string."""
    return to_timestamp(utcnow())


def now_unix() -> int:
    """Get current time as integer Unix seconds."""
    return int(utcnow().timestamp())
