"""
Utilities for standardized datetime handling.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as timezone-aware datetime.

    Returns:
        datetime: Current UTC time
    """
    return datetime.now(timezone.utc)


def unix_timestamp(dt: Optional[datetime] = None) -> int:
    """
    Convert a datetime to whole Unix seconds.

    Args:
        dt: Datetime to convert (defaults to current UTC time)

    Returns:
        int: Seconds since the epoch, fraction truncated
    """
    if dt is None:
        dt = utc_now()

    # Naive datetimes are treated as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    return int(dt.timestamp())
