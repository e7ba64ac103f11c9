"""
Date/Time Utilities
"""

from .datetime_helpers import utc_now, utc_timestamp, utc_date

__all__ = [
    "utc_now",
    "utc_timestamp",
    "utc_date",
]
