"""
Scadenzario Deadline Set Builders

Expands a macro deadline into its ordered statutory sub-deadlines.

Each macro type has a fixed table of (label, counting method, amount):

| macro          | sub-deadlines                                   |
|----------------|-------------------------------------------------|
| 171-ter        | 40, 20, 10 calendar days before the hearing     |
| 189            | 60, 30, 10 calendar days before the hearing     |
| 281-duodecies  | 30, 10 calendar days before the hearing         |
| appeal-long    | 6 months after publication of the judgment     |
| appeal-short   | 30 calendar days after notification             |
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional, Union

from ..calendars import ITALIAN_CALENDAR, HolidayCalendar
from ..models import (
    CountMethod,
    DeadlineCalculationResult,
    DeadlinePreview,
    DeadlineRule,
    MacroConfiguration,
    MacroDefinition,
    MacroType,
    ReferenceDateKind,
    parse_macro_type,
)
from .counter import (
    BACKWARD,
    TraceStep,
    add_months_forward,
    count_backward,
    count_forward,
    trace_count,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Statutory Tables
# =============================================================================

MACRO_DEFINITIONS: dict[MacroType, MacroDefinition] = {
    MacroType.ART_171_TER: MacroDefinition(
        macro_type=MacroType.ART_171_TER,
        title="Art. 171-ter C.P.C. (Memorie integrative)",
        reference_date_kind=ReferenceDateKind.HEARING,
        rules=(
            DeadlineRule(
                label="MEMORIA 171-TER 1° TERMINE",
                description="Prima memoria integrativa",
                method=CountMethod.DAYS_BACKWARD,
                amount=40,
            ),
            DeadlineRule(
                label="MEMORIA 171-TER 2° TERMINE",
                description="Seconda memoria integrativa",
                method=CountMethod.DAYS_BACKWARD,
                amount=20,
            ),
            DeadlineRule(
                label="MEMORIA 171-TER 3° TERMINE",
                description="Terza memoria (repliche)",
                method=CountMethod.DAYS_BACKWARD,
                amount=10,
            ),
        ),
    ),
    MacroType.ART_189: MacroDefinition(
        macro_type=MacroType.ART_189,
        title="Art. 189 C.P.C. (Precisazione conclusioni)",
        reference_date_kind=ReferenceDateKind.HEARING,
        rules=(
            DeadlineRule(
                label="FOGLIO DI PRECISAZIONE DELLE CONCLUSIONI",
                description="Precisazione delle conclusioni",
                method=CountMethod.DAYS_BACKWARD,
                amount=60,
            ),
            DeadlineRule(
                label="MEMORIA 189 2° TERMINE (CONCLUSIONALE)",
                description="Comparsa conclusionale",
                method=CountMethod.DAYS_BACKWARD,
                amount=30,
            ),
            DeadlineRule(
                label="MEMORIA 189 3° TERMINE C.P.C. (REPLICHE)",
                description="Memoria di replica",
                method=CountMethod.DAYS_BACKWARD,
                amount=10,
            ),
        ),
    ),
    MacroType.ART_281_DUODECIES: MacroDefinition(
        macro_type=MacroType.ART_281_DUODECIES,
        title="Art. 281-duodecies C.P.C. (Memorie)",
        reference_date_kind=ReferenceDateKind.HEARING,
        rules=(
            DeadlineRule(
                label="MEMORIA 281-DUODECIES 1° TERMINE",
                description="Prima memoria",
                method=CountMethod.DAYS_BACKWARD,
                amount=30,
            ),
            DeadlineRule(
                label="MEMORIA 281-DUODECIES 2° TERMINE",
                description="Seconda memoria",
                method=CountMethod.DAYS_BACKWARD,
                amount=10,
            ),
        ),
    ),
    MacroType.APPEAL_LONG: MacroDefinition(
        macro_type=MacroType.APPEAL_LONG,
        title="Atto di appello - termine lungo (art. 327 C.P.C.)",
        reference_date_kind=ReferenceDateKind.PUBLICATION,
        rules=(
            DeadlineRule(
                label="ATTO DI APPELLO (TERMINE LUNGO)",
                description="Atto di appello da depositare entro 6 mesi dalla pubblicazione della sentenza",
                method=CountMethod.MONTHS_FORWARD,
                amount=6,
            ),
        ),
    ),
    MacroType.APPEAL_SHORT: MacroDefinition(
        macro_type=MacroType.APPEAL_SHORT,
        title="Atto di appello - termine breve (art. 325 C.P.C.)",
        reference_date_kind=ReferenceDateKind.NOTIFICATION,
        rules=(
            DeadlineRule(
                label="ATTO DI APPELLO (TERMINE BREVE)",
                description="Atto di appello da depositare entro 30 giorni dalla notifica della sentenza",
                method=CountMethod.DAYS_FORWARD,
                amount=30,
            ),
        ),
    ),
}

_undefined = [m.value for m in MacroType if m not in MACRO_DEFINITIONS]
if _undefined:
    raise RuntimeError(f"Macro types without a deadline table: {_undefined}")


def get_macro_definition(macro_type: Union[MacroType, str]) -> MacroDefinition:
    """
    Get the statutory table of a macro type.

    Raises:
        UnsupportedMacroType: If the macro type is unknown
    """
    return MACRO_DEFINITIONS[parse_macro_type(macro_type)]


def list_macro_types() -> list[MacroDefinition]:
    """All macro definitions, in enumeration order."""
    return [MACRO_DEFINITIONS[m] for m in MacroType]


# =============================================================================
# Deadline Calculator
# =============================================================================

@dataclass
class DeadlineCalculator:
    """
    Expands macro configurations into dated sub-deadlines.

    Holds no state beyond the injected calendar; the same configuration
    always yields the same ordered results.

    Usage:
        calculator = DeadlineCalculator()

        config = MacroConfiguration.create("171-ter", "2025-10-15")
        for result in calculator.calculate(config):
            print(result.label, result.display_date)

        # Preview with a user-chosen date
        preview = calculator.preview(config, {"MEMORIA 171-TER 3° TERMINE": "2025-10-02"})
    """

    # Calendar for holiday/suspension checks
    calendar: HolidayCalendar = field(default_factory=lambda: ITALIAN_CALENDAR)

    def apply_rule(
        self,
        rule: DeadlineRule,
        reference_date: date,
        include_suspension: bool,
    ) -> DeadlineCalculationResult:
        """Compute one sub-deadline."""
        if rule.method == CountMethod.DAYS_BACKWARD:
            due = count_backward(reference_date, rule.amount, include_suspension, self.calendar)
        elif rule.method == CountMethod.DAYS_FORWARD:
            due = count_forward(reference_date, rule.amount, include_suspension, self.calendar)
        elif rule.method == CountMethod.MONTHS_FORWARD:
            due = add_months_forward(reference_date, rule.amount, include_suspension, self.calendar)
        else:
            raise ValueError(f"Unknown counting method: {rule.method}")

        return DeadlineCalculationResult(
            label=rule.label,
            description=rule.description,
            result_date=due,
            offset_days=rule.offset_days,
        )

    def build(
        self,
        macro_type: MacroType,
        config: MacroConfiguration,
    ) -> list[DeadlineCalculationResult]:
        """Compute every sub-deadline of a macro type for a configuration."""
        definition = MACRO_DEFINITIONS[macro_type]
        results = [
            self.apply_rule(rule, config.reference_date, config.include_suspension)
            for rule in definition.rules
        ]
        logger.debug(
            "Built %d deadlines for %s from %s (suspension=%s)",
            len(results), macro_type.value, config.reference_date, config.include_suspension,
        )
        return results

    def calculate(self, config: MacroConfiguration) -> list[DeadlineCalculationResult]:
        """
        Dispatch a configuration to the builder of its macro type.

        Raises:
            UnsupportedMacroType: If the macro type is unknown
        """
        return self.build(parse_macro_type(config.macro_type), config)

    def preview(
        self,
        config: MacroConfiguration,
        overrides: Optional[dict[str, Any]] = None,
    ) -> DeadlinePreview:
        """
        Calculate deadlines and apply user overrides for review.

        Raises:
            UnsupportedMacroType: If the macro type is unknown
            UnknownDeadlineLabel: If an override names no deadline
        """
        preview = DeadlinePreview.from_results(config, self.calculate(config))
        if overrides:
            preview = preview.with_overrides(overrides)
        return preview

    def trace(
        self,
        reference_date: Any,
        num_days: int,
        include_suspension: bool = False,
        direction: int = BACKWARD,
    ) -> list[TraceStep]:
        """Step-by-step description of a calendar day count."""
        return trace_count(reference_date, num_days, include_suspension, direction, self.calendar)


# Default calculator on the Italian calendar
DEFAULT_CALCULATOR = DeadlineCalculator()


# =============================================================================
# Per-article Builders
# =============================================================================

def calculate_171_ter_deadlines(
    config: MacroConfiguration,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """
    Article 171-ter C.P.C. integrative briefs.

    - First brief: 40 calendar days before the hearing
    - Second brief: 20 calendar days before the hearing
    - Third brief (replies): 10 calendar days before the hearing
    """
    calc = DeadlineCalculator(calendar=calendar) if calendar else DEFAULT_CALCULATOR
    return calc.build(MacroType.ART_171_TER, config)


def calculate_189_deadlines(
    config: MacroConfiguration,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """
    Article 189 C.P.C. final briefs.

    - Statement of conclusions: 60 calendar days before the hearing
    - Closing brief: 30 calendar days before the hearing
    - Reply brief: 10 calendar days before the hearing
    """
    calc = DeadlineCalculator(calendar=calendar) if calendar else DEFAULT_CALCULATOR
    return calc.build(MacroType.ART_189, config)


def calculate_281_duodecies_deadlines(
    config: MacroConfiguration,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """
    Article 281-duodecies C.P.C. simplified procedure briefs.

    - First brief: 30 calendar days before the hearing
    - Second brief: 10 calendar days before the hearing
    """
    calc = DeadlineCalculator(calendar=calendar) if calendar else DEFAULT_CALCULATOR
    return calc.build(MacroType.ART_281_DUODECIES, config)


def calculate_appeal_long_deadline(
    config: MacroConfiguration,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """Appeal, long term: 6 months from publication of the judgment."""
    calc = DeadlineCalculator(calendar=calendar) if calendar else DEFAULT_CALCULATOR
    return calc.build(MacroType.APPEAL_LONG, config)


def calculate_appeal_short_deadline(
    config: MacroConfiguration,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """Appeal, short term: 30 calendar days from notification of the judgment."""
    calc = DeadlineCalculator(calendar=calendar) if calendar else DEFAULT_CALCULATOR
    return calc.build(MacroType.APPEAL_SHORT, config)


def calculate_macro_deadlines(
    config: MacroConfiguration,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """
    Calculate the deadlines of any macro type.

    Convenience function over `DeadlineCalculator.calculate`.

    Raises:
        UnsupportedMacroType: If the macro type is unknown
    """
    calc = DeadlineCalculator(calendar=calendar) if calendar else DEFAULT_CALCULATOR
    return calc.calculate(config)


def calculate_deadlines(
    macro_type: Union[MacroType, str],
    reference_date: Any,
    include_suspension: bool = False,
    calendar: Optional[HolidayCalendar] = None,
) -> list[DeadlineCalculationResult]:
    """
    Calculate deadlines from loosely typed input.

    Raises:
        UnsupportedMacroType: If the macro type is unknown
        InvalidDateInput: If the reference date is malformed
    """
    config = MacroConfiguration.create(macro_type, reference_date, include_suspension)
    return calculate_macro_deadlines(config, calendar)
