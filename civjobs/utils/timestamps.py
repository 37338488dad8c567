"""UTC timestamp helpers for run bookkeeping."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Example:
        >>> utc_now().tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def elapsed_seconds(started_at: datetime, finished_at: datetime) -> float:
    """Seconds between two timestamps, rounded to milliseconds."""
    return round((finished_at - started_at).total_seconds(), 3)
