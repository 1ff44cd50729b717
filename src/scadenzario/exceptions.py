"""
Scadenzario Exception Hierarchy

Domain-specific exceptions for procedural deadline calculation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: SC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScadenzarioError(Exception):
    """
    Base exception for all Scadenzario errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (SC_*)
        details: Additional context about the error
    """
    message: str
    code: str = "SC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Calculation Errors
# =============================================================================

@dataclass
class UnsupportedMacroType(ScadenzarioError):
    """Macro type is outside the supported enumeration."""
    code: str = "SC_UNSUPPORTED_MACRO_TYPE"


@dataclass
class InvalidDateInput(ScadenzarioError):
    """Reference date is not a well-formed calendar date."""
    code: str = "SC_INVALID_DATE_INPUT"


@dataclass
class InvalidDayCount(ScadenzarioError):
    """Day or month count is not a positive integer."""
    code: str = "SC_INVALID_DAY_COUNT"


@dataclass
class InvalidFlagValue(ScadenzarioError):
    """Yes/no option is neither a bool nor a recognised flag string."""
    code: str = "SC_INVALID_FLAG_VALUE"


@dataclass
class UnknownDeadlineLabel(ScadenzarioError):
    """Override refers to a deadline label that is not in the preview."""
    code: str = "SC_UNKNOWN_DEADLINE_LABEL"


# =============================================================================
# Calendar Pack Errors
# =============================================================================

@dataclass
class CalendarPackLoadError(ScadenzarioError):
    """Failed to load calendar pack from file."""
    code: str = "SC_CALENDAR_PACK_LOAD_ERROR"


@dataclass
class CalendarPackValidationError(ScadenzarioError):
    """Calendar pack schema validation failed."""
    code: str = "SC_CALENDAR_PACK_VALIDATION_ERROR"


@dataclass
class CalendarPackVersionMismatch(ScadenzarioError):
    """Calendar pack schema version doesn't match expected version."""
    code: str = "SC_CALENDAR_PACK_VERSION_MISMATCH"
