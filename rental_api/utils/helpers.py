"""
Utility helper functions for timestamps.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC time truncated to millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def to_iso_timestamp(value: datetime) -> str:
    """
    Format a datetime as an ISO 8601 UTC string, e.g. ``2024-01-01T12:00:00.000Z``.

    Naive datetimes are assumed to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def get_current_timestamp() -> str:
    """Get current timestamp in ISO format."""
    return to_iso_timestamp(utc_now())
