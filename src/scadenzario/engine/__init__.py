"""
Scadenzario Engine

Calendar day counting and macro deadline expansion.
"""
from __future__ import annotations

from .builders import (
    DEFAULT_CALCULATOR,
    MACRO_DEFINITIONS,
    DeadlineCalculator,
    calculate_171_ter_deadlines,
    calculate_189_deadlines,
    calculate_281_duodecies_deadlines,
    calculate_appeal_long_deadline,
    calculate_appeal_short_deadline,
    calculate_deadlines,
    calculate_macro_deadlines,
    get_macro_definition,
    list_macro_types,
)
from .counter import (
    BACKWARD,
    FORWARD,
    CountStep,
    StepKind,
    TraceStep,
    add_months,
    add_months_forward,
    count_backward,
    count_forward,
    prudential_adjustment,
    trace_backward,
    trace_count,
)
from .status import (
    UPCOMING_THRESHOLD_DAYS,
    URGENT_THRESHOLD_DAYS,
    days_remaining,
    deadline_urgency,
    urgency_for_days,
)

__all__ = [
    # Counter
    "BACKWARD",
    "FORWARD",
    "CountStep",
    "StepKind",
    "TraceStep",
    "count_backward",
    "count_forward",
    "add_months",
    "add_months_forward",
    "prudential_adjustment",
    "trace_backward",
    "trace_count",
    # Builders
    "MACRO_DEFINITIONS",
    "DEFAULT_CALCULATOR",
    "DeadlineCalculator",
    "get_macro_definition",
    "list_macro_types",
    "calculate_171_ter_deadlines",
    "calculate_189_deadlines",
    "calculate_281_duodecies_deadlines",
    "calculate_appeal_long_deadline",
    "calculate_appeal_short_deadline",
    "calculate_macro_deadlines",
    "calculate_deadlines",
    # Status
    "URGENT_THRESHOLD_DAYS",
    "UPCOMING_THRESHOLD_DAYS",
    "days_remaining",
    "urgency_for_days",
    "deadline_urgency",
]
