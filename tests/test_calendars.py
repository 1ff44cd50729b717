"""
Tests for the holiday and suspension calendars.

Tests cover:
- Easter computation
- Fixed and moveable Italian holidays
- The August suspension window
- Working-day checks
- Table-driven calendars built from a custom configuration
"""
import pytest
from datetime import date, timedelta

from scadenzario.calendars import (
    ITALIAN_CALENDAR,
    ITALIAN_FIXED_HOLIDAYS,
    CalendarConfig,
    FixedHoliday,
    HolidayCalendar,
    StatutoryCalendar,
    SuspensionWindow,
    easter_monday,
    easter_sunday,
    holidays_for_year,
    is_holiday,
    is_in_suspension,
    is_working_day,
)


class TestEaster:
    """Tests for the Gauss/Meeus Easter computation."""

    @pytest.mark.parametrize("year,expected", [
        (2000, date(2000, 4, 23)),
        (2011, date(2011, 4, 24)),
        (2019, date(2019, 4, 21)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
        (2038, date(2038, 4, 25)),
        (2285, date(2285, 3, 22)),
    ])
    def test_known_easter_dates(self, year, expected):
        assert easter_sunday(year) == expected

    def test_easter_is_sunday(self):
        for year in range(1900, 2101):
            assert easter_sunday(year).weekday() == 6

    def test_easter_within_bounds(self):
        for year in range(1583, 2500):
            sunday = easter_sunday(year)
            assert date(year, 3, 22) <= sunday <= date(year, 4, 25)

    def test_easter_monday_follows_sunday(self):
        assert easter_monday(2025) == date(2025, 4, 21)
        assert easter_monday(2024) == date(2024, 4, 1)


class TestItalianHolidays:
    """Tests for the Italian national holiday table."""

    @pytest.mark.parametrize("month,day", [
        (1, 1), (1, 6), (4, 25), (5, 1), (6, 2),
        (8, 15), (11, 1), (12, 8), (12, 25), (12, 26),
    ])
    def test_fixed_holidays_every_year(self, month, day):
        for year in (1999, 2025, 2031):
            assert is_holiday(date(year, month, day))

    def test_ten_fixed_holidays(self):
        assert len(ITALIAN_FIXED_HOLIDAYS) == 10

    def test_easter_monday_is_holiday(self):
        assert is_holiday(date(2025, 4, 21))
        assert ITALIAN_CALENDAR.get_holiday_name(date(2025, 4, 21)) == "Lunedì dell'Angelo"

    def test_easter_sunday_is_not_a_listed_holiday(self):
        # Non-working only because it is a Sunday
        assert not is_holiday(date(2025, 4, 20))
        assert not is_working_day(date(2025, 4, 20))

    def test_good_friday_is_working_day(self):
        assert not is_holiday(date(2025, 4, 18))
        assert is_working_day(date(2025, 4, 18))

    def test_ordinary_day_not_holiday(self):
        assert not is_holiday(date(2025, 10, 15))
        assert ITALIAN_CALENDAR.get_holiday_name(date(2025, 10, 15)) is None

    def test_holiday_names(self):
        assert ITALIAN_CALENDAR.get_holiday_name(date(2025, 8, 15)) == "Ferragosto"
        assert ITALIAN_CALENDAR.get_holiday_name(date(2025, 12, 26)) == "Santo Stefano"

    def test_holidays_for_year_sorted(self):
        holidays = holidays_for_year(2025)
        days = [d for d, _ in holidays]
        assert len(holidays) == 11
        assert days == sorted(days)
        assert days[0] == date(2025, 1, 1)
        assert (date(2025, 4, 21), "Lunedì dell'Angelo") in holidays

    def test_easter_monday_on_liberation_day_listed_once(self):
        # Easter 2011 was April 24
        holidays = holidays_for_year(2011)
        assert len(holidays) == 10
        assert (date(2011, 4, 25), "Festa della Liberazione") in holidays

    def test_holidays_in_range(self):
        found = ITALIAN_CALENDAR.get_holidays_in_range(date(2025, 12, 1), date(2025, 12, 31))
        assert found == [date(2025, 12, 8), date(2025, 12, 25), date(2025, 12, 26)]


class TestSuspension:
    """Tests for the August suspension window."""

    def test_every_august_day_in_window(self):
        d = date(2025, 8, 1)
        while d.month == 8:
            assert is_in_suspension(d)
            d += timedelta(days=1)

    @pytest.mark.parametrize("d", [date(2025, 7, 31), date(2025, 9, 1), date(2025, 1, 15)])
    def test_outside_window(self, d):
        assert not is_in_suspension(d)

    def test_window_edges(self):
        assert ITALIAN_CALENDAR.day_before_suspension(2025) == date(2025, 7, 31)
        assert ITALIAN_CALENDAR.day_after_suspension(2025) == date(2025, 9, 1)

    def test_suspension_only_affects_working_day_when_requested(self):
        # Tuesday 5 August 2025
        d = date(2025, 8, 5)
        assert is_working_day(d)
        assert not is_working_day(d, include_suspension=True)

    def test_custom_window(self):
        window = SuspensionWindow(month=12, first_day=20, last_day=31)
        assert window.contains(date(2025, 12, 24))
        assert not window.contains(date(2025, 12, 19))
        assert window.day_before(2025) == date(2025, 12, 19)
        assert window.day_after(2025) == date(2026, 1, 1)


class TestWorkingDay:
    """Tests for working-day checks."""

    def test_weekday_is_working_day(self):
        assert is_working_day(date(2025, 10, 15))

    def test_weekend_is_not_working_day(self):
        assert not is_working_day(date(2025, 10, 4))   # Saturday
        assert not is_working_day(date(2025, 10, 5))   # Sunday

    def test_holiday_is_not_working_day(self):
        assert not is_working_day(date(2025, 12, 8))   # Monday

    def test_weekend_only_calendar(self, weekend_only_calendar):
        assert weekend_only_calendar.is_working_day(date(2025, 12, 25))
        assert not weekend_only_calendar.is_working_day(date(2025, 12, 27))


class TestStatutoryCalendar:
    """Tests for calendars built from a custom configuration."""

    def test_satisfies_protocol(self):
        assert isinstance(ITALIAN_CALENDAR, HolidayCalendar)

    def test_custom_table(self):
        config = CalendarConfig(
            id="IT-milano",
            name="Milano",
            fixed_holidays=ITALIAN_FIXED_HOLIDAYS + (FixedHoliday(12, 7, "Sant'Ambrogio"),),
        )
        calendar = StatutoryCalendar.from_config(config)
        assert calendar.is_holiday(date(2025, 12, 7))
        assert calendar.get_holiday_name(date(2025, 12, 7)) == "Sant'Ambrogio"
        assert not ITALIAN_CALENDAR.is_holiday(date(2025, 12, 7))

    def test_without_easter_monday(self):
        config = CalendarConfig(id="no-easter", fixed_holidays=ITALIAN_FIXED_HOLIDAYS, easter_monday=False)
        calendar = StatutoryCalendar.from_config(config)
        assert not calendar.is_holiday(date(2025, 4, 21))

    def test_calendar_is_immutable(self):
        with pytest.raises(AttributeError):
            ITALIAN_CALENDAR.config = None
