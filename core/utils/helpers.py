"""
inPEP utility functions
"""

from __future__ import annotations
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Tuple, Union


# Time utilities


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def day_bounds(day: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """Return the first and last instant of a calendar day in UTC."""
    if isinstance(day, datetime):
        day = ensure_utc(day).date()
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = datetime.combine(day, time.max, tzinfo=timezone.utc)
    return start, end


def days_between(earlier: datetime, later: datetime) -> float:
    return (ensure_utc(later) - ensure_utc(earlier)) / timedelta(days=1)


def format_last_activity(when: datetime, now: Optional[datetime] = None) -> str:
    """Human readable 'time ago' label used on the caregiver dashboard."""
    now = now or utcnow()
    diff_hours = int((ensure_utc(now) - ensure_utc(when)) // timedelta(hours=1))
    diff_days = diff_hours // 24

    if diff_hours < 1:
        return "Just now"
    if diff_hours < 24:
        return f"{diff_hours} hours ago"
    if diff_days == 1:
        return "1 day ago"
    return f"{diff_days} days ago"


# Numeric utilities


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


# Query-string utilities


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma separated query value, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
