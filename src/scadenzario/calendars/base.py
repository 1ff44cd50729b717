"""
Scadenzario Holiday Calendar Base

Provides the protocol, the immutable configuration table and the base
implementation for the calendars used by the deadline engine.

The calendar system is pluggable: different jurisdictions can have
different holiday tables and suspension windows. The engine never reads
a global table, it receives the calendar it must use.
"""
from __future__ import annotations

import calendar as _calendar
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Protocol, runtime_checkable


# =============================================================================
# Configuration Table
# =============================================================================

@dataclass(frozen=True)
class FixedHoliday:
    """A holiday falling on the same month/day every year."""
    month: int
    day: int
    name: str = ""

    def matches(self, d: date) -> bool:
        return d.month == self.month and d.day == self.day


@dataclass(frozen=True)
class SuspensionWindow:
    """
    Annual period during which procedural term counting is frozen.

    The window is contained in a single month, bounds inclusive.
    """
    month: int = 8
    first_day: int = 1
    last_day: int = 31

    def contains(self, d: date) -> bool:
        return d.month == self.month and self.first_day <= d.day <= self.last_day

    def day_before(self, year: int) -> date:
        """Last countable day preceding the window (July 31 for August)."""
        return date(year, self.month, self.first_day) - timedelta(days=1)

    def day_after(self, year: int) -> date:
        """First countable day following the window (September 1 for August)."""
        last = min(self.last_day, _calendar.monthrange(year, self.month)[1])
        return date(year, self.month, last) + timedelta(days=1)


@dataclass(frozen=True)
class CalendarConfig:
    """
    Immutable holiday and suspension table for one jurisdiction.

    Attributes:
        id: Identifier of the table (e.g. "IT-national")
        name: Human-readable name
        jurisdiction: Jurisdiction code
        fixed_holidays: Month/day holidays repeating every year
        easter_monday: Whether Easter Monday is a holiday
        suspension: Annual suspension window
    """
    id: str
    name: str = ""
    jurisdiction: str = ""
    fixed_holidays: tuple[FixedHoliday, ...] = ()
    easter_monday: bool = True
    easter_monday_name: str = "Lunedì dell'Angelo"
    suspension: SuspensionWindow = field(default_factory=SuspensionWindow)


# =============================================================================
# Calendar Protocol
# =============================================================================

@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for the calendars consumed by the deadline engine.

    Implementations answer three questions about a single day: is it a
    holiday, is it inside the suspension window, and is it a day on
    which a deadline may fall.
    """

    def is_holiday(self, d: date) -> bool:
        ...

    def is_weekend(self, d: date) -> bool:
        ...

    def is_in_suspension(self, d: date) -> bool:
        ...

    def is_working_day(self, d: date, include_suspension: bool = False) -> bool:
        ...

    def day_before_suspension(self, year: int) -> date:
        ...

    def day_after_suspension(self, year: int) -> date:
        ...


# =============================================================================
# Base Calendar
# =============================================================================

@dataclass(frozen=True)
class BaseCalendar(ABC):
    """
    Abstract base class for holiday calendars.

    Provides weekend, suspension and working-day logic.
    Subclasses must implement `is_holiday()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))

    suspension: SuspensionWindow = field(default_factory=SuspensionWindow)

    @abstractmethod
    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday."""
        ...

    def get_holiday_name(self, d: date) -> Optional[str]:
        """Name of the holiday on a date, None if it is not one."""
        return "Festività" if self.is_holiday(d) else None

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_in_suspension(self, d: date) -> bool:
        """Check if a date falls inside the suspension window."""
        return self.suspension.contains(d)

    def is_working_day(self, d: date, include_suspension: bool = False) -> bool:
        """
        Check if a deadline may fall on a date.

        A working day is neither a weekend day nor a holiday and, when the
        suspension applies, is outside the suspension window.
        """
        if self.is_weekend(d) or self.is_holiday(d):
            return False
        if include_suspension and self.is_in_suspension(d):
            return False
        return True

    def day_before_suspension(self, year: int) -> date:
        return self.suspension.day_before(year)

    def day_after_suspension(self, year: int) -> date:
        return self.suspension.day_after(year)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Get all holidays within a date range (both ends inclusive)."""
        holidays = []
        current = start
        while current <= end:
            if self.is_holiday(current):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays


@dataclass(frozen=True)
class NoHolidayCalendar(BaseCalendar):
    """
    A calendar with no holidays.

    Only weekends (and the suspension window, when requested) are
    non-working. Useful for testing the counting rules in isolation.
    """

    def is_holiday(self, d: date) -> bool:
        return False
