"""
Tests for the calendar day counter.

Tests cover:
- Backward and forward counting
- Suspension window collapsed to one day
- Prudential adjustment of non-working endpoints
- Month addition
- Count traces
- Invalid input
"""
import pytest
from datetime import date, datetime

from scadenzario.engine import (
    BACKWARD,
    FORWARD,
    add_months,
    add_months_forward,
    count_backward,
    count_forward,
    prudential_adjustment,
    trace_backward,
    trace_count,
)
from scadenzario.engine.counter import _run
from scadenzario.calendars import ITALIAN_CALENDAR
from scadenzario.exceptions import InvalidDateInput, InvalidDayCount


class TestCountBackward:
    """Tests for counting calendar days backward from a hearing."""

    def test_simple_count(self):
        # Wednesday 15 October 2025 - 40 days = Friday 5 September
        assert count_backward(date(2025, 10, 15), 40) == date(2025, 9, 5)

    def test_weekends_count_as_days(self):
        # Wednesday - 20 days = Thursday 25 September
        assert count_backward(date(2025, 10, 15), 20) == date(2025, 9, 25)

    def test_sunday_endpoint_moves_to_friday(self):
        # 5 October 2025 is a Sunday
        assert count_backward(date(2025, 10, 15), 10) == date(2025, 10, 3)

    def test_holiday_endpoint_moves_back(self):
        # 26 Dec (holiday) -> 25 Dec (holiday) -> 24 Dec
        assert count_backward(date(2025, 12, 27), 1) == date(2025, 12, 24)

    def test_easter_monday_endpoint(self):
        # Easter Monday, Easter Sunday and Saturday are skipped
        assert count_backward(date(2025, 4, 23), 2) == date(2025, 4, 18)

    def test_ferragosto_then_weekend(self):
        # 16 Aug 2025 (Saturday) -> 15 Aug (Ferragosto) -> 14 Aug
        assert count_backward(date(2025, 10, 15), 60) == date(2025, 8, 14)

    def test_accepts_iso_string(self):
        assert count_backward("2025-10-15", 40) == date(2025, 9, 5)

    def test_datetime_truncated_to_day(self):
        assert count_backward(datetime(2025, 10, 15, 23, 59), 40) == date(2025, 9, 5)

    def test_result_is_working_day(self, italian_calendar):
        reference = date(2025, 1, 1)
        for n in range(1, 120, 7):
            result = count_backward(reference, n)
            assert result < reference
            assert italian_calendar.is_working_day(result)


class TestCountBackwardWithSuspension:
    """Tests for the August suspension in backward counting."""

    def test_august_collapses_to_one_day(self):
        # 9 days to 1 Sep, August counts 1, 20 more from 31 Jul
        assert count_backward(date(2025, 9, 10), 30, include_suspension=True) == date(2025, 7, 11)

    def test_jump_lands_on_july_31(self):
        assert count_backward(date(2025, 9, 10), 10, include_suspension=True) == date(2025, 7, 31)

    def test_without_suspension_stays_in_august(self):
        assert count_backward(date(2025, 9, 10), 30) == date(2025, 8, 11)
        # 31 Aug is Sunday, 30 Aug Saturday
        assert count_backward(date(2025, 9, 10), 10) == date(2025, 8, 29)

    def test_suspension_with_long_count(self):
        assert count_backward(date(2025, 10, 15), 60, include_suspension=True) == date(2025, 7, 16)

    def test_suspension_irrelevant_far_from_august(self):
        assert count_backward(date(2025, 3, 20), 30, include_suspension=True) == count_backward(
            date(2025, 3, 20), 30
        )

    def test_result_never_in_suspension(self, italian_calendar):
        reference = date(2025, 10, 15)
        for n in range(1, 100):
            result = count_backward(reference, n, include_suspension=True)
            assert not italian_calendar.is_in_suspension(result)


class TestCountForward:
    """Tests for counting calendar days forward."""

    def test_simple_count(self):
        # Sunday 20 July 2025 + 30 days = Tuesday 19 August
        assert count_forward(date(2025, 7, 20), 30) == date(2025, 8, 19)

    def test_suspension_skips_to_september(self):
        # 11 days to 31 Jul, August counts 1, 18 more from 1 Sep
        assert count_forward(date(2025, 7, 20), 30, include_suspension=True) == date(2025, 9, 19)

    def test_holidays_and_weekend_move_forward(self):
        # 25 Dec -> 26 Dec -> weekend -> Monday 29 Dec
        assert count_forward(date(2025, 12, 23), 2) == date(2025, 12, 29)

    def test_prudential_shift_into_suspension_leaves_window(self):
        # Saturday 31 July 2027 -> 1 August is suspended -> 1 September
        assert count_forward(date(2027, 7, 30), 1, include_suspension=True) == date(2027, 9, 1)
        assert count_forward(date(2027, 7, 30), 1) == date(2027, 8, 2)


class TestPrudentialAdjustment:
    """Tests for moving endpoints to working days."""

    def test_working_day_unchanged(self):
        assert prudential_adjustment(date(2025, 10, 15)) == date(2025, 10, 15)

    def test_backward_over_weekend(self):
        # Sunday 10 Aug 2025 -> Friday 8 Aug
        assert prudential_adjustment(date(2025, 8, 10)) == date(2025, 8, 8)

    def test_backward_out_of_suspension(self):
        assert prudential_adjustment(date(2025, 8, 10), include_suspension=True) == date(2025, 7, 31)

    def test_forward_out_of_suspension(self):
        result = prudential_adjustment(date(2025, 8, 10), include_suspension=True, direction=FORWARD)
        assert result == date(2025, 9, 1)


class TestAddMonths:
    """Tests for month arithmetic."""

    def test_same_day_of_month(self):
        assert add_months(date(2025, 7, 20), 6) == date(2026, 1, 20)

    def test_clamps_to_month_end(self):
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2025, 8, 31), 6) == date(2026, 2, 28)

    def test_crosses_year(self):
        assert add_months(date(2025, 12, 15), 2) == date(2026, 2, 15)

    def test_out_of_range(self):
        with pytest.raises(InvalidDateInput):
            add_months(date(9999, 12, 1), 1)


class TestAddMonthsForward:
    """Tests for month terms with adjustment."""

    def test_working_day_result(self):
        # Tuesday 20 January 2026
        assert add_months_forward(date(2025, 7, 20), 6) == date(2026, 1, 20)

    def test_start_in_august_moves_to_september(self):
        # 1 Sep 2025 + 6 months = Sunday 1 Mar 2026 -> Monday 2 Mar
        assert add_months_forward(date(2025, 8, 10), 6, include_suspension=True) == date(2026, 3, 2)

    def test_start_in_august_without_suspension(self):
        assert add_months_forward(date(2025, 8, 10), 6) == date(2026, 2, 10)

    def test_july_start_not_moved(self):
        # Only starts inside the window are moved
        assert add_months_forward(date(2025, 7, 20), 6, include_suspension=True) == date(2026, 1, 20)

    def test_holiday_endpoint_moves_forward(self):
        # Monday 8 December 2025 -> Tuesday 9
        assert add_months_forward(date(2025, 6, 8), 6) == date(2025, 12, 9)

    def test_endpoint_in_august(self):
        assert add_months_forward(date(2025, 2, 1), 6) == date(2025, 8, 1)
        assert add_months_forward(date(2025, 2, 1), 6, include_suspension=True) == date(2025, 9, 1)


class TestCountTrace:
    """Tests for the step-by-step count description."""

    def test_last_step_matches_count(self):
        for n in (10, 20, 30, 40):
            for suspension in (False, True):
                steps = trace_backward(date(2025, 9, 10), n, suspension)
                assert steps[-1].day == count_backward(date(2025, 9, 10), n, suspension)
                assert steps[-1].final

    def test_counted_steps_equal_budget(self):
        steps = trace_backward(date(2025, 9, 10), 30, include_suspension=True)
        assert sum(1 for s in steps if s.counted) == 30

    def test_first_step_is_reference(self):
        steps = trace_backward(date(2025, 10, 15), 10)
        assert steps[0].day == date(2025, 10, 15)
        assert not steps[0].counted
        assert steps[0].remaining == 10

    def test_suspension_step(self):
        steps = trace_backward(date(2025, 9, 10), 10, include_suspension=True)
        assert len(steps) == 11
        assert steps[-1].day == date(2025, 7, 31)
        assert steps[-1].counted
        assert "Sospensione feriale" in steps[-1].note
        assert steps[-1].note.endswith("SCADENZA FINALE")

    def test_prudential_steps(self):
        steps = trace_backward(date(2025, 10, 15), 10)
        # Start, 10 counted days, Saturday and Friday
        assert len(steps) == 13
        assert [s.day for s in steps[-2:]] == [date(2025, 10, 4), date(2025, 10, 3)]
        assert not steps[-1].counted
        assert steps[-1].remaining == 0
        assert steps[-1].weekday == "Ven"

    def test_forward_trace(self):
        steps = trace_count(date(2025, 7, 20), 30, include_suspension=True, direction=FORWARD)
        assert steps[-1].day == date(2025, 9, 19)
        assert steps[-1].to_dict()["date"] == "2025-09-19"

    def test_only_last_step_final(self):
        steps = trace_count(date(2025, 10, 15), 5, direction=BACKWARD)
        assert [s.final for s in steps].count(True) == 1


class TestInvalidInput:
    """Tests for rejected input."""

    @pytest.mark.parametrize("num_days", [0, -5, 1.5, "10", True, None])
    def test_invalid_day_count(self, num_days):
        with pytest.raises(InvalidDayCount):
            count_backward(date(2025, 10, 15), num_days)

    def test_invalid_month_count(self):
        with pytest.raises(InvalidDayCount):
            add_months_forward(date(2025, 7, 20), 0)

    @pytest.mark.parametrize("value", [
        "2025-13-01", "15/10/2025", "", 20251015, None,
        "20251015", "2025-W42-3", "2025-10-15T00:00", "+2025-10-15",
    ])
    def test_invalid_reference_date(self, value):
        with pytest.raises(InvalidDateInput):
            count_backward(value, 10)

    def test_count_leaves_date_range(self):
        with pytest.raises(InvalidDateInput):
            count_backward(date(1, 1, 1), 1)
        with pytest.raises(InvalidDateInput):
            count_forward(date(9999, 12, 31), 1)


class TestForwardAfterBackward:
    """Counting back then forth never passes a working reference date."""

    def test_never_after_reference(self, italian_calendar):
        reference = date(2025, 10, 15)
        for n in (1, 10, 20, 30, 40, 60):
            back = count_backward(reference, n)
            assert count_forward(back, n) <= reference


class TestLongCounts:
    """Counters keep only the endpoint of long counts."""

    def test_counter_keeps_last_step_only(self):
        steps = _run(date(2025, 10, 15), 5000, True, ITALIAN_CALENDAR, BACKWARD, keep=1)
        assert len(steps) == 1
        assert steps[0].day == count_backward(date(2025, 10, 15), 5000, include_suspension=True)

    def test_long_count_matches_trace(self):
        for suspension in (False, True):
            expected = trace_backward(date(2025, 10, 15), 20000, suspension)[-1].day
            assert count_backward(date(2025, 10, 15), 20000, suspension) == expected
