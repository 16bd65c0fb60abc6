"""
Datetime utilities for timezone handling
"""
from datetime import datetime, timezone


def utcnow_aware() -> datetime:
    """Current UTC time as a timezone-aware datetime"""
    return datetime.now(timezone.utc)
