"""
Deadline preview with per-entry overrides.

Before deadlines are stored, the user reviews the computed dates and may
replace any of them. An override only replaces the stored date; the
calculated date is kept alongside and nothing is recomputed.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Iterable, Optional

from ..exceptions import UnknownDeadlineLabel
from .dates import to_calendar_date
from .deadline import DeadlineCalculationResult, MacroConfiguration


@dataclass(frozen=True)
class PreviewEntry:
    """A computed deadline and its optional user-chosen replacement date."""
    result: DeadlineCalculationResult
    override_date: Optional[date] = None

    @property
    def label(self) -> str:
        return self.result.label

    @property
    def calculated_date(self) -> date:
        return self.result.result_date

    @property
    def final_date(self) -> date:
        return self.override_date or self.result.result_date

    @property
    def is_overridden(self) -> bool:
        return self.override_date is not None and self.override_date != self.calculated_date

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.result.label,
            "description": self.result.description,
            "offset_days": self.result.offset_days,
            "calculated_date": self.calculated_date.isoformat(),
            "final_date": self.final_date.isoformat(),
            "overridden": self.is_overridden,
        }


@dataclass(frozen=True)
class DeadlinePreview:
    """
    Ordered preview of the deadlines of one macro.

    Usage:
        preview = DeadlinePreview.from_results(config, results)
        preview = preview.with_override("MEMORIA 171-TER 3° TERMINE", date(2025, 10, 2))
        to_store = preview.final_results()
    """
    configuration: MacroConfiguration
    entries: tuple[PreviewEntry, ...]

    @classmethod
    def from_results(
        cls,
        configuration: MacroConfiguration,
        results: Iterable[DeadlineCalculationResult],
    ) -> DeadlinePreview:
        return cls(
            configuration=configuration,
            entries=tuple(PreviewEntry(result=r) for r in results),
        )

    @property
    def labels(self) -> list[str]:
        return [e.label for e in self.entries]

    def get(self, label: str) -> PreviewEntry:
        for entry in self.entries:
            if entry.label == label:
                return entry
        raise UnknownDeadlineLabel(
            message=f"No deadline labelled {label!r} in this preview",
            details={"label": label, "available": self.labels},
        )

    def with_override(self, label: str, new_date: Any) -> DeadlinePreview:
        """Return a new preview where one entry's date is replaced."""
        target = self.get(label)
        override = to_calendar_date(new_date, field_name="override_date")
        entries = tuple(
            replace(e, override_date=override) if e is target else e
            for e in self.entries
        )
        return replace(self, entries=entries)

    def with_overrides(self, overrides: dict[str, Any]) -> DeadlinePreview:
        preview = self
        for label, new_date in overrides.items():
            preview = preview.with_override(label, new_date)
        return preview

    def final_results(self) -> list[DeadlineCalculationResult]:
        """Results to persist, overrides applied."""
        return [
            replace(e.result, result_date=e.final_date) if e.override_date else e.result
            for e in self.entries
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "macro_type": self.configuration.macro_type.value,
            "reference_date": self.configuration.reference_date.isoformat(),
            "include_suspension": self.configuration.include_suspension,
            "deadlines": [e.to_dict() for e in self.entries],
        }
