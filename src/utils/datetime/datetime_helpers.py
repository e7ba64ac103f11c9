"""
DateTime Helper Utilities
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_timestamp(dt: Optional[datetime] = None) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision and a ``Z`` suffix.

    Example: ``2024-05-01T09:30:00.000Z``
    """
    dt = (dt or utc_now()).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_date(dt: Optional[datetime] = None) -> str:
    """Date part (YYYY-MM-DD) of the UTC timestamp."""
    return utc_timestamp(dt).split("T")[0]
