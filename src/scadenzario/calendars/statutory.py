"""
Table-driven Statutory Calendar

A calendar built from an immutable `CalendarConfig`: fixed month/day
holidays plus, optionally, Easter Monday computed per year.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from functools import lru_cache
from typing import Optional

from .base import BaseCalendar, CalendarConfig


@lru_cache(maxsize=256)
def easter_sunday(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian (Gauss/Meeus)
    algorithm.

    This is the standard algorithm for calculating Easter in Western
    Christianity.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def easter_monday(year: int) -> date:
    """Calculate Easter Monday (the day after Easter Sunday)."""
    return easter_sunday(year) + timedelta(days=1)


@dataclass(frozen=True)
class StatutoryCalendar(BaseCalendar):
    """
    Holiday calendar driven by a configuration table.

    The table is injected at construction; the calendar holds no other
    state and never mutates it.
    """

    config: CalendarConfig = field(default_factory=lambda: CalendarConfig(id="empty"))

    @classmethod
    def from_config(cls, config: CalendarConfig) -> StatutoryCalendar:
        """Create a calendar whose suspension window comes from the table."""
        return cls(config=config, suspension=config.suspension)

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a fixed or moveable holiday."""
        for holiday in self.config.fixed_holidays:
            if holiday.matches(d):
                return True
        return self.config.easter_monday and d == easter_monday(d.year)

    def get_holiday_name(self, d: date) -> Optional[str]:
        """
        Get the name of a holiday on a given date.

        Args:
            d: Date to check

        Returns:
            Holiday name if it's a holiday, None otherwise
        """
        for holiday in self.config.fixed_holidays:
            if holiday.matches(d):
                return holiday.name or None
        if self.config.easter_monday and d == easter_monday(d.year):
            return self.config.easter_monday_name
        return None

    def holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """
        Get all holidays for a year with names.

        Returns list of (date, name) tuples sorted by date. When Easter
        Monday falls on a fixed holiday (April 25, 2011) the date is listed
        once, under the fixed holiday's name.
        """
        holidays = []
        for holiday in self.config.fixed_holidays:
            try:
                holidays.append((date(year, holiday.month, holiday.day), holiday.name))
            except ValueError:
                # Feb 29 in a non-leap year
                continue
        if self.config.easter_monday:
            monday = easter_monday(year)
            if all(d != monday for d, _ in holidays):
                holidays.append((monday, self.config.easter_monday_name))
        return sorted(holidays, key=lambda x: x[0])
