"""
utils/time_utils.py

Purpose: Time and expiry helpers

- Timezone-aware "now"
- Expiry instant calculations
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Returns the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def expires_at(seconds: int, start: Optional[datetime] = None) -> datetime:
    """
    Returns the instant `seconds` after `start` (defaults to now).
    """
    return (start or utc_now()) + timedelta(seconds=seconds)


def ttl_minutes(seconds: int) -> int:
    """
    Whole minutes in a TTL, for user-facing messages.
    """
    return max(1, seconds // 60)
