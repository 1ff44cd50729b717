"""
Scadenzario Models

Value types shared by the calendars, the engine and the outer surfaces.
"""
from __future__ import annotations

from .dates import DISPLAY_DATE_FORMAT, format_deadline_date, to_calendar_date, weekday_abbreviation
from .deadline import (
    FALSE_VALUES,
    TRUE_VALUES,
    DeadlineCalculationResult,
    DeadlineRule,
    MacroConfiguration,
    MacroDefinition,
    parse_flag,
    parse_macro_type,
)
from .enums import CountMethod, MacroType, ReferenceDateKind, Urgency
from .preview import DeadlinePreview, PreviewEntry

__all__ = [
    # Enums
    "CountMethod",
    "MacroType",
    "ReferenceDateKind",
    "Urgency",
    # Dates
    "DISPLAY_DATE_FORMAT",
    "format_deadline_date",
    "to_calendar_date",
    "weekday_abbreviation",
    # Deadlines
    "DeadlineRule",
    "MacroDefinition",
    "MacroConfiguration",
    "DeadlineCalculationResult",
    "parse_macro_type",
    "parse_flag",
    "TRUE_VALUES",
    "FALSE_VALUES",
    # Preview
    "DeadlinePreview",
    "PreviewEntry",
]
