"""
Scadenzario Calendars

Holiday and suspension calendars for procedural deadline calculation.

Primary focus: Italian national holidays and the August suspension
period (sospensione feriale).

Provides:
- HolidayCalendar protocol for custom implementations
- CalendarConfig, the immutable holiday/suspension table
- StatutoryCalendar, a calendar driven by a CalendarConfig
- ITALIAN_CALENDAR, the default Italian calendar
- Utility functions for quick checks

Usage:
    from scadenzario.calendars import ITALIAN_CALENDAR, is_holiday

    is_holiday(date(2025, 4, 21))               # Easter Monday -> True
    ITALIAN_CALENDAR.is_in_suspension(date(2025, 8, 10))   # True
"""
from __future__ import annotations

from .base import (
    BaseCalendar,
    CalendarConfig,
    FixedHoliday,
    HolidayCalendar,
    NoHolidayCalendar,
    SuspensionWindow,
)
from .italy import (
    ITALIAN_CALENDAR,
    ITALIAN_CONFIG,
    ITALIAN_FIXED_HOLIDAYS,
    SUMMER_SUSPENSION,
    holidays_for_year,
    is_holiday,
    is_in_suspension,
    is_working_day,
)
from .statutory import StatutoryCalendar, easter_monday, easter_sunday

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    "NoHolidayCalendar",
    "StatutoryCalendar",
    # Configuration table
    "CalendarConfig",
    "FixedHoliday",
    "SuspensionWindow",
    # Easter
    "easter_sunday",
    "easter_monday",
    # Italy
    "ITALIAN_CALENDAR",
    "ITALIAN_CONFIG",
    "ITALIAN_FIXED_HOLIDAYS",
    "SUMMER_SUSPENSION",
    "is_holiday",
    "is_in_suspension",
    "is_working_day",
    "holidays_for_year",
]
