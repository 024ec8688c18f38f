"""Timestamp parsing for the formats found in tool logs."""

from datetime import datetime, timezone


def parse_iso(value: str) -> datetime | None:
    """Parse an ISO-8601 string to an aware UTC datetime, or None if invalid.

    Naive values are taken as UTC.
    """
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def from_epoch_ms(value: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
