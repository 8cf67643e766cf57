"""
Relative time ("3h 12m ago")
============================

Turns an event timestamp into a coarse age string for the "Time Ago" column.
Coarser units drop finer ones: weeks never show days, hours never show
seconds. Output always uses whole, non-negative numbers.
"""

from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Any, Optional
import math

INVALID = "Invalid date"

SECONDS_PER_DAY = 86400
DAYS_PER_MONTH = 30.44
DAYS_PER_YEAR = 365.25


def _coerce(value: Any) -> Optional[datetime]:
    """Best-effort conversion to datetime; None when not possible."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value)
        if isinstance(value, str):
            return datetime.fromisoformat(value.strip())
    except (ValueError, OverflowError, OSError):
        return None
    return None


def time_ago(value: Any, now: Optional[datetime] = None) -> str:
    """Format the age of `value` relative to `now` (default: current time)."""
    when = _coerce(value)
    if when is None:
        return INVALID
    if now is None:
        now = datetime.now(timezone.utc) if when.tzinfo is not None else datetime.now()

    try:
        total_seconds = math.floor((now - when).total_seconds())
    except (TypeError, ValueError):
        # naive vs aware mix, or NaT-like values
        return INVALID
    if total_seconds < 1:
        return "just now"

    days = total_seconds // SECONDS_PER_DAY
    if days >= 7:
        weeks = days // 7
        if weeks >= 4:
            months = math.floor(days / DAYS_PER_MONTH)
            if months >= 12:
                years = math.floor(days / DAYS_PER_YEAR)
                return f"{years}y ago"
            return f"{months}mo ago"
        return f"{weeks}w ago"

    if days >= 1:
        hours_today = (total_seconds % SECONDS_PER_DAY) // 3600
        if hours_today > 0:
            return f"{days}d {hours_today}h ago"
        return f"{days}d ago"

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours >= 1:
        return f"{hours}h {minutes}m ago" if minutes > 0 else f"{hours}h ago"
    if minutes >= 1:
        return f"{minutes}m {seconds}s ago" if seconds > 0 else f"{minutes}m ago"
    return f"{max(0, seconds)}s ago"
