"""
Italian National Holiday Calendar

Implements the Italian public holidays relevant to procedural deadlines.

Fixed holidays:
- Capodanno (January 1)
- Epifania (January 6)
- Festa della Liberazione (April 25)
- Festa del Lavoro (May 1)
- Festa della Repubblica (June 2)
- Ferragosto (August 15)
- Ognissanti (November 1)
- Immacolata Concezione (December 8)
- Natale (December 25)
- Santo Stefano (December 26)

Moveable holiday:
- Lunedì dell'Angelo (Easter Monday)

Easter Sunday itself always falls on a Sunday and needs no entry.

Suspension period (sospensione feriale dei termini processuali):
August 1 - August 31, Law 742/1969.
"""
from __future__ import annotations

from datetime import date

from .base import CalendarConfig, FixedHoliday, SuspensionWindow
from .statutory import StatutoryCalendar


ITALIAN_FIXED_HOLIDAYS: tuple[FixedHoliday, ...] = (
    FixedHoliday(1, 1, "Capodanno"),
    FixedHoliday(1, 6, "Epifania"),
    FixedHoliday(4, 25, "Festa della Liberazione"),
    FixedHoliday(5, 1, "Festa del Lavoro"),
    FixedHoliday(6, 2, "Festa della Repubblica"),
    FixedHoliday(8, 15, "Ferragosto"),
    FixedHoliday(11, 1, "Ognissanti"),
    FixedHoliday(12, 8, "Immacolata Concezione"),
    FixedHoliday(12, 25, "Natale"),
    FixedHoliday(12, 26, "Santo Stefano"),
)

SUMMER_SUSPENSION = SuspensionWindow(month=8, first_day=1, last_day=31)

ITALIAN_CONFIG = CalendarConfig(
    id="IT-national",
    name="Festività nazionali italiane",
    jurisdiction="IT",
    fixed_holidays=ITALIAN_FIXED_HOLIDAYS,
    easter_monday=True,
    easter_monday_name="Lunedì dell'Angelo",
    suspension=SUMMER_SUSPENSION,
)

# Pre-configured calendar instance
ITALIAN_CALENDAR = StatutoryCalendar.from_config(ITALIAN_CONFIG)


def is_holiday(d: date) -> bool:
    """
    Check if a date is an Italian national holiday.

    Uses the default Italian calendar.

    Args:
        d: Date to check

    Returns:
        True if it's a fixed holiday or Easter Monday
    """
    return ITALIAN_CALENDAR.is_holiday(d)


def is_in_suspension(d: date) -> bool:
    """Check if a date falls in the August suspension period."""
    return ITALIAN_CALENDAR.is_in_suspension(d)


def is_working_day(d: date, include_suspension: bool = False) -> bool:
    """Check if a deadline may fall on a date under the Italian calendar."""
    return ITALIAN_CALENDAR.is_working_day(d, include_suspension)


def holidays_for_year(year: int) -> list[tuple[date, str]]:
    """Italian national holidays of a year, sorted by date."""
    return ITALIAN_CALENDAR.holidays_for_year(year)
