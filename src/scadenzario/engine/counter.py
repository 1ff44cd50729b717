"""
Scadenzario Calendar Day Counter

Counts procedural terms in calendar days (or months) from a reference
date, then applies the prudential adjustment to the endpoint.

Counting rules:
- Every calendar day counts, weekends and holidays included.
- With the suspension active, stepping into the suspension window jumps
  straight past it (to July 31 going backward, to September 1 going
  forward) and the jump consumes exactly one unit of the budget.
- Only once the budget is exhausted, a non-working endpoint is moved to
  the nearest working day: earlier for terms counted backward from a
  hearing, later for terms counted forward.
"""
from __future__ import annotations

import logging
from calendar import monthrange
from collections import deque
from dataclasses import dataclass, replace
from datetime import MAXYEAR, MINYEAR, date, timedelta
from enum import Enum
from typing import Any, Iterator, Optional

from ..calendars import ITALIAN_CALENDAR, HolidayCalendar
from ..exceptions import InvalidDateInput, InvalidDayCount
from ..models import to_calendar_date, weekday_abbreviation

logger = logging.getLogger(__name__)


BACKWARD = -1
FORWARD = 1


# =============================================================================
# Count Steps
# =============================================================================

class StepKind(str, Enum):
    """What happened at one step of a count."""
    START = "start"                                   # Reference date, not counted
    COUNTED = "counted"                               # Ordinary calendar day
    SUSPENSION_SKIP = "suspension_skip"               # Window collapsed to one day
    PRUDENTIAL_SHIFT = "prudential_shift"             # Endpoint moved one day
    PRUDENTIAL_SUSPENSION = "prudential_suspension"   # Endpoint moved out of the window


@dataclass(frozen=True)
class CountStep:
    """
    One step of a calendar day count.

    Attributes:
        day: Cursor position after the step
        kind: What the step did
        remaining: Budget left after the step
    """
    day: date
    kind: StepKind
    remaining: int

    @property
    def counted(self) -> bool:
        return self.kind in (StepKind.COUNTED, StepKind.SUSPENSION_SKIP)

    @property
    def weekday(self) -> str:
        return weekday_abbreviation(self.day)


def _check_count(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDayCount(
            message=f"{field_name} must be a positive integer, got {value!r}",
            details={"field": field_name, "value": repr(value)},
        )
    return value


def _skip_target(calendar: HolidayCalendar, d: date, direction: int) -> date:
    if direction == BACKWARD:
        return calendar.day_before_suspension(d.year)
    return calendar.day_after_suspension(d.year)


def _adjust(
    current: date,
    include_suspension: bool,
    calendar: HolidayCalendar,
    direction: int,
) -> Iterator[CountStep]:
    """Prudential adjustment: move a non-working endpoint to a working day."""
    step = timedelta(days=direction)
    while not calendar.is_working_day(current, include_suspension):
        if include_suspension and calendar.is_in_suspension(current):
            current = _skip_target(calendar, current, direction)
            yield CountStep(current, StepKind.PRUDENTIAL_SUSPENSION, 0)
        else:
            current = current + step
            yield CountStep(current, StepKind.PRUDENTIAL_SHIFT, 0)


def _walk(
    start: date,
    num_days: int,
    include_suspension: bool,
    calendar: HolidayCalendar,
    direction: int,
) -> Iterator[CountStep]:
    """Yield every step of a count, prudential adjustment included."""
    step = timedelta(days=direction)
    current = start
    remaining = num_days
    yield CountStep(current, StepKind.START, remaining)

    while remaining > 0:
        current = current + step
        remaining -= 1
        if include_suspension and calendar.is_in_suspension(current):
            current = _skip_target(calendar, current, direction)
            yield CountStep(current, StepKind.SUSPENSION_SKIP, remaining)
        else:
            yield CountStep(current, StepKind.COUNTED, remaining)

    yield from _adjust(current, include_suspension, calendar, direction)


def _run(
    start: Any,
    num_days: Any,
    include_suspension: bool,
    calendar: HolidayCalendar,
    direction: int,
    keep: Optional[int] = None,
) -> deque[CountStep]:
    """Run a count, keeping the last `keep` steps (all of them by default)."""
    start = to_calendar_date(start)
    num_days = _check_count(num_days, "num_days")
    try:
        return deque(_walk(start, num_days, include_suspension, calendar, direction), maxlen=keep)
    except OverflowError as e:
        raise InvalidDateInput(
            message=f"Count of {num_days} days from {start.isoformat()} leaves the supported date range",
            details={"reference_date": start.isoformat(), "num_days": num_days},
        ) from e


# =============================================================================
# Calendar Day Counters
# =============================================================================

def count_backward(
    reference_date: Any,
    num_days: int,
    include_suspension: bool = False,
    calendar: HolidayCalendar = ITALIAN_CALENDAR,
) -> date:
    """
    Count calendar days backward from a reference date.

    Args:
        reference_date: Hearing date (not counted)
        num_days: Calendar days to count back
        include_suspension: Collapse the suspension window to one day
        calendar: Holiday/suspension calendar to apply

    Returns:
        The deadline, moved back to the previous working day if needed

    Raises:
        InvalidDateInput: Malformed reference date
        InvalidDayCount: num_days is not a positive integer
    """
    result = _run(reference_date, num_days, include_suspension, calendar, BACKWARD, keep=1)[-1].day
    logger.debug(
        "count_backward %s -%d (suspension=%s) -> %s",
        reference_date, num_days, include_suspension, result,
    )
    return result


def count_forward(
    start_date: Any,
    num_days: int,
    include_suspension: bool = False,
    calendar: HolidayCalendar = ITALIAN_CALENDAR,
) -> date:
    """
    Count calendar days forward from a start date.

    Mirror of `count_backward`: the suspension window is skipped to the
    day after it, and a non-working endpoint moves to the next working day.
    """
    result = _run(start_date, num_days, include_suspension, calendar, FORWARD, keep=1)[-1].day
    logger.debug(
        "count_forward %s +%d (suspension=%s) -> %s",
        start_date, num_days, include_suspension, result,
    )
    return result


def prudential_adjustment(
    d: Any,
    include_suspension: bool = False,
    direction: int = BACKWARD,
    calendar: HolidayCalendar = ITALIAN_CALENDAR,
) -> date:
    """Move a date to the nearest working day in the given direction."""
    current = to_calendar_date(d)
    for step in _adjust(current, include_suspension, calendar, direction):
        current = step.day
    return current


# =============================================================================
# Month Adder
# =============================================================================

def add_months(d: date, months: int) -> date:
    """
    Add calendar months to a date.

    The day of month is kept; when the target month is shorter it is
    clamped to the target month's last day (January 31 + 1 month is
    February 28, or 29 in leap years).
    """
    index = d.month - 1 + months
    year = d.year + index // 12
    month = index % 12 + 1
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateInput(
            message=f"Adding {months} months to {d.isoformat()} leaves the supported date range",
            details={"reference_date": d.isoformat(), "months": months},
        )
    day = min(d.day, monthrange(year, month)[1])
    return date(year, month, day)


def add_months_forward(
    start_date: Any,
    num_months: int,
    include_suspension: bool = False,
    calendar: HolidayCalendar = ITALIAN_CALENDAR,
) -> date:
    """
    Add calendar months to a start date.

    With the suspension active, a start date inside the suspension window
    is first moved to the day after the window: the term does not start
    running during the suspension. The endpoint is then moved forward to
    the next working day.

    Raises:
        InvalidDateInput: Malformed start date
        InvalidDayCount: num_months is not a positive integer
    """
    start = to_calendar_date(start_date, field_name="start_date")
    num_months = _check_count(num_months, "num_months")

    effective = start
    if include_suspension and calendar.is_in_suspension(start):
        effective = calendar.day_after_suspension(start.year)

    try:
        result = prudential_adjustment(
            add_months(effective, num_months), include_suspension, FORWARD, calendar
        )
    except OverflowError as e:
        raise InvalidDateInput(
            message=f"Adding {num_months} months to {start.isoformat()} leaves the supported date range",
            details={"start_date": start.isoformat(), "num_months": num_months},
        ) from e

    logger.debug(
        "add_months_forward %s +%d months (suspension=%s, effective start %s) -> %s",
        start, num_months, include_suspension, effective, result,
    )
    return result


# =============================================================================
# Count Trace
# =============================================================================

@dataclass(frozen=True)
class TraceStep:
    """A count step described for display."""
    day: date
    weekday: str
    counted: bool
    remaining: int
    note: str
    final: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.day.isoformat(),
            "weekday": self.weekday,
            "counted": self.counted,
            "remaining": self.remaining,
            "note": self.note,
            "final": self.final,
        }


def _describe(step: CountStep, calendar: HolidayCalendar) -> str:
    if step.kind == StepKind.START:
        return "Data di riferimento (punto di partenza, non si conta)"
    if step.kind == StepKind.SUSPENSION_SKIP:
        return "Sospensione feriale: periodo saltato, conta come un giorno"
    if step.kind == StepKind.PRUDENTIAL_SUSPENSION:
        return "Criterio prudenziale: data nella sospensione feriale, spostata fuori dal periodo"
    if step.kind == StepKind.PRUDENTIAL_SHIFT:
        return "Criterio prudenziale: spostata di un giorno"
    if calendar.is_weekend(step.day):
        return "Weekend (conta come giorno di calendario)"
    if calendar.is_holiday(step.day):
        return "Festività (conta come giorno di calendario)"
    return "Giorno feriale (conta)"


def trace_count(
    reference_date: Any,
    num_days: int,
    include_suspension: bool = False,
    direction: int = BACKWARD,
    calendar: HolidayCalendar = ITALIAN_CALENDAR,
) -> list[TraceStep]:
    """
    Describe every step of a calendar day count.

    The last step is flagged `final`; its date equals the result of
    `count_backward` (or `count_forward`) for the same arguments.
    """
    steps = _run(reference_date, num_days, include_suspension, calendar, direction)
    trace = [
        TraceStep(
            day=s.day,
            weekday=s.weekday,
            counted=s.counted,
            remaining=s.remaining,
            note=_describe(s, calendar),
        )
        for s in steps
    ]
    last = trace[-1]
    trace[-1] = replace(last, note=f"{last.note}. SCADENZA FINALE", final=True)
    return trace


def trace_backward(
    reference_date: Any,
    num_days: int,
    include_suspension: bool = False,
    calendar: HolidayCalendar = ITALIAN_CALENDAR,
) -> list[TraceStep]:
    """Describe every step of a backward count (see `trace_count`)."""
    return trace_count(reference_date, num_days, include_suspension, BACKWARD, calendar)
