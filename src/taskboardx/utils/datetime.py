"""Utilities for datetime handling."""

from datetime import UTC, datetime, timedelta


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def to_iso(dt: datetime) -> str:
    """Convert datetime to ISO format string."""
    return dt.isoformat()


def from_iso(value: str) -> datetime:
    """Parse ISO format string to an aware datetime."""
    # Handle both 'Z' suffix and explicit timezone
    return ensure_aware(datetime.fromisoformat(value.replace("Z", "+00:00")))


def ensure_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def start_of_day(dt: datetime) -> datetime:
    """Truncate a datetime to midnight of the same day."""
    return ensure_aware(dt).replace(hour=0, minute=0, second=0, microsecond=0)


def days_from_now(days: int) -> datetime:
    """Get the UTC datetime `days` days from now."""
    return now_utc() + timedelta(days=days)


def epoch_millis(dt: datetime | None = None) -> int:
    """Milliseconds since the epoch, used for time-based ids."""
    return int((dt or now_utc()).timestamp() * 1000)
