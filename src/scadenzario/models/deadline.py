"""
Scadenzario Deadline Models

Value types for procedural deadline calculation.

Key components:
- DeadlineRule: One statutory sub-deadline (label, counting method, amount)
- MacroDefinition: The ordered rules of a macro type
- MacroConfiguration: Caller input (macro type, reference date, suspension)
- DeadlineCalculationResult: A computed sub-deadline

All models are frozen: results are produced fresh on every calculation
and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from ..exceptions import InvalidFlagValue, UnsupportedMacroType
from .dates import format_deadline_date, to_calendar_date
from .enums import CountMethod, MacroType, ReferenceDateKind


# =============================================================================
# Deadline Rule
# =============================================================================

@dataclass(frozen=True)
class DeadlineRule:
    """
    A statutory sub-deadline of a macro.

    Attributes:
        label: Statutory name of the sub-deadline
        description: Human-readable purpose
        method: How the date is counted from the reference date
        amount: Number of days or months (always positive)
    """
    label: str
    description: str
    method: CountMethod
    amount: int

    @property
    def offset_days(self) -> int:
        """Signed day offset from the reference date (0 for month terms)."""
        if self.method == CountMethod.DAYS_BACKWARD:
            return -self.amount
        if self.method == CountMethod.DAYS_FORWARD:
            return self.amount
        return 0

    @property
    def display_term(self) -> str:
        """Get human-readable term description."""
        if self.method == CountMethod.MONTHS_FORWARD:
            return f"{self.amount} mesi dopo"
        direction = "prima" if self.method == CountMethod.DAYS_BACKWARD else "dopo"
        return f"{self.amount} giorni {direction}"


# =============================================================================
# Macro Definition
# =============================================================================

@dataclass(frozen=True)
class MacroDefinition:
    """
    The fixed table of sub-deadlines for one macro type.

    Rules are kept in statutory order.
    """
    macro_type: MacroType
    title: str
    reference_date_kind: ReferenceDateKind
    rules: tuple[DeadlineRule, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "macro_type": self.macro_type.value,
            "title": self.title,
            "reference_date_kind": self.reference_date_kind.value,
            "deadlines": [
                {
                    "label": r.label,
                    "description": r.description,
                    "method": r.method.value,
                    "amount": r.amount,
                    "offset_days": r.offset_days,
                }
                for r in self.rules
            ],
        }


# =============================================================================
# Macro Configuration
# =============================================================================

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_flag(value: Any, field_name: str = "flag") -> bool:
    """
    Resolve a yes/no option.

    Accepts bools and the strings in TRUE_VALUES / FALSE_VALUES (any case).

    Raises:
        InvalidFlagValue: For any other value
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in TRUE_VALUES:
            return True
        if key in FALSE_VALUES:
            return False
    raise InvalidFlagValue(
        message=f"Invalid {field_name}: {value!r} is not a yes/no value",
        details={"field": field_name, "value": repr(value)},
    )


def parse_macro_type(value: Union[MacroType, str]) -> MacroType:
    """
    Resolve a macro type identifier.

    Raises:
        UnsupportedMacroType: If the value is not a known macro type
    """
    if isinstance(value, MacroType):
        return value
    try:
        return MacroType(value)
    except ValueError:
        raise UnsupportedMacroType(
            message=f"Unsupported macro type: {value!r}",
            details={
                "macro_type": repr(value),
                "supported": [m.value for m in MacroType],
            },
        ) from None


@dataclass(frozen=True)
class MacroConfiguration:
    """
    Input of a macro deadline calculation.

    Attributes:
        macro_type: Which statutory macro to expand
        reference_date: Hearing, publication or notification date
        include_suspension: Whether the August suspension applies
    """
    macro_type: MacroType
    reference_date: date
    include_suspension: bool = False

    @classmethod
    def create(
        cls,
        macro_type: Union[MacroType, str],
        reference_date: Any,
        include_suspension: Union[bool, str] = False,
    ) -> MacroConfiguration:
        """
        Build a configuration from loosely typed input.

        Raises:
            UnsupportedMacroType: Unknown macro type
            InvalidDateInput: Malformed reference date
            InvalidFlagValue: include_suspension is not a yes/no value
        """
        return cls(
            macro_type=parse_macro_type(macro_type),
            reference_date=to_calendar_date(reference_date),
            include_suspension=parse_flag(include_suspension, "include_suspension"),
        )


# =============================================================================
# Calculation Result
# =============================================================================

@dataclass(frozen=True)
class DeadlineCalculationResult:
    """
    A computed sub-deadline.

    Attributes:
        label: Statutory name of the sub-deadline
        description: Human-readable purpose
        result_date: Due date after prudential adjustment
        offset_days: Signed offset from the reference date (0 for month terms)
    """
    label: str
    description: str
    result_date: date
    offset_days: int

    @property
    def display_date(self) -> str:
        return format_deadline_date(self.result_date)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "label": self.label,
            "description": self.description,
            "result_date": self.result_date.isoformat(),
            "offset_days": self.offset_days,
        }
