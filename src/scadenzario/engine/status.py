"""
Deadline status relative to a reference day.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..models import Urgency, to_calendar_date


# Days before the deadline for each urgency band
URGENT_THRESHOLD_DAYS = 7
UPCOMING_THRESHOLD_DAYS = 14


def days_remaining(deadline: Any, today: Optional[date] = None) -> int:
    """
    Calendar days from today to the deadline.

    Negative when the deadline has passed, 0 on the day itself.
    """
    due = to_calendar_date(deadline, field_name="deadline")
    ref = to_calendar_date(today, field_name="today") if today is not None else date.today()
    return (due - ref).days


def urgency_for_days(days: int) -> Urgency:
    """Map remaining days to an urgency band."""
    if days < 0:
        return Urgency.EXPIRED
    elif days <= URGENT_THRESHOLD_DAYS:
        return Urgency.URGENT
    elif days <= UPCOMING_THRESHOLD_DAYS:
        return Urgency.UPCOMING
    return Urgency.NORMAL


def deadline_urgency(deadline: Any, today: Optional[date] = None) -> Urgency:
    """Urgency band of a deadline as of today."""
    return urgency_for_days(days_remaining(deadline, today))
