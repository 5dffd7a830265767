"""
Datetime utilities for consistent timezone handling.

Stored timestamps are timezone-aware and set by the database. Calendar dates
shown to the assistant ("today") are taken in the deployment timezone.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo


def today_in(tz_name: str) -> date:
    """
    Return today's calendar date in the given IANA timezone.

    Args:
        tz_name: IANA timezone name, e.g. "UTC" or "Asia/Dhaka"

    Returns:
        The local calendar date
    """
    return datetime.now(ZoneInfo(tz_name)).date()
