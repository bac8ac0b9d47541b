"""Time utilities for the domain layer."""

from datetime import datetime, timezone

EVENT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def format_event_timestamp(dt: datetime | None) -> str | None:
    """Format a datetime the way event payloads carry it (UTC, second precision)."""
    if dt is None:
        return None
    return ensure_tz_aware(dt).astimezone(timezone.utc).strftime(
        EVENT_TIMESTAMP_FORMAT,
    )
