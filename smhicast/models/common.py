"""Common time helpers shared across models."""

from datetime import UTC, datetime, tzinfo


def parse_utc(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_local(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert an aware datetime to ``tz``, or to the system zone when None."""
    return dt.astimezone(tz)
