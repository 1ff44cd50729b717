"""
Scadenzario - Italian Civil Procedure Deadline Engine

Computes statutory procedural deadlines (articles 171-ter, 189,
281-duodecies C.P.C. and appeal terms) from a hearing, publication or
notification date.

Core Principle: count calendar days, adjust only the endpoint.

Key Features:
- Calendar-day counting backward and forward
- August suspension period collapsed to a single countable day
- Italian national holidays, Easter Monday included
- Prudential adjustment of non-working endpoints
- Pluggable holiday tables through calendar packs

Quick Start:
    from scadenzario import MacroConfiguration, calculate_macro_deadlines

    config = MacroConfiguration.create("171-ter", "2025-10-15")
    for deadline in calculate_macro_deadlines(config):
        print(deadline.label, deadline.display_date)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    ITALIAN_CALENDAR,
    CalendarConfig,
    HolidayCalendar,
    StatutoryCalendar,
    easter_monday,
    easter_sunday,
    is_holiday,
    is_in_suspension,
)

# =============================================================================
# Models
# =============================================================================
from .models import (
    DeadlineCalculationResult,
    DeadlinePreview,
    MacroConfiguration,
    MacroType,
    Urgency,
    format_deadline_date,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    DeadlineCalculator,
    add_months_forward,
    calculate_171_ter_deadlines,
    calculate_189_deadlines,
    calculate_281_duodecies_deadlines,
    calculate_appeal_long_deadline,
    calculate_appeal_short_deadline,
    calculate_deadlines,
    calculate_macro_deadlines,
    count_backward,
    count_forward,
    days_remaining,
    deadline_urgency,
    list_macro_types,
    trace_backward,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CalendarPackLoadError,
    CalendarPackValidationError,
    CalendarPackVersionMismatch,
    InvalidDateInput,
    InvalidDayCount,
    InvalidFlagValue,
    ScadenzarioError,
    UnknownDeadlineLabel,
    UnsupportedMacroType,
)

__all__ = [
    "__version__",
    # Calendars
    "HolidayCalendar",
    "CalendarConfig",
    "StatutoryCalendar",
    "ITALIAN_CALENDAR",
    "easter_sunday",
    "easter_monday",
    "is_holiday",
    "is_in_suspension",
    # Models
    "MacroType",
    "MacroConfiguration",
    "DeadlineCalculationResult",
    "DeadlinePreview",
    "Urgency",
    "format_deadline_date",
    # Engine
    "DeadlineCalculator",
    "count_backward",
    "count_forward",
    "add_months_forward",
    "trace_backward",
    "calculate_171_ter_deadlines",
    "calculate_189_deadlines",
    "calculate_281_duodecies_deadlines",
    "calculate_appeal_long_deadline",
    "calculate_appeal_short_deadline",
    "calculate_macro_deadlines",
    "calculate_deadlines",
    "list_macro_types",
    "days_remaining",
    "deadline_urgency",
    # Exceptions
    "ScadenzarioError",
    "UnsupportedMacroType",
    "InvalidDateInput",
    "InvalidDayCount",
    "InvalidFlagValue",
    "UnknownDeadlineLabel",
    "CalendarPackLoadError",
    "CalendarPackValidationError",
    "CalendarPackVersionMismatch",
]
