"""
Scadenzario Calendar Pack Schemas

Pydantic models for validating calendar pack YAML/JSON files.

A calendar pack holds the holiday table and the suspension window of a
jurisdiction. It maps to `scadenzario.calendars.CalendarConfig`.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

import calendar
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


def _max_day(month: int) -> int:
    # Leap year so that February 29 is accepted
    return calendar.monthrange(2024, month)[1]


# =============================================================================
# Schemas
# =============================================================================

class FixedHolidaySchema(BaseModel):
    """Schema for a holiday on the same month/day every year."""
    month: int = Field(..., ge=1, le=12, description="Month (1-12)")
    day: int = Field(..., ge=1, le=31, description="Day of month")
    name: str = Field("", description="Holiday name")

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "FixedHolidaySchema":
        if self.day > _max_day(self.month):
            raise ValueError(f"Day {self.day} does not exist in month {self.month}")
        return self


class SuspensionSchema(BaseModel):
    """Schema for the annual suspension window (single month, inclusive)."""
    month: int = Field(8, ge=1, le=12)
    first_day: int = Field(1, ge=1, le=31)
    last_day: int = Field(31, ge=1, le=31)

    @model_validator(mode="after")
    def validate_window(self) -> "SuspensionSchema":
        if self.first_day > self.last_day:
            raise ValueError("Suspension first_day must not be after last_day")
        if self.last_day > _max_day(self.month):
            raise ValueError(f"Day {self.last_day} does not exist in month {self.month}")
        return self


class CalendarPackSchema(BaseModel):
    """Root schema for a calendar pack file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    id: str = Field(..., min_length=1, description="Unique identifier")
    name: str = Field("", description="Human-readable name")
    jurisdiction: str = Field("IT", description="Jurisdiction code")
    fixed_holidays: list[FixedHolidaySchema] = Field(default_factory=list)
    easter_monday: bool = Field(True, description="Easter Monday is a holiday")
    easter_monday_name: str = Field("Lunedì dell'Angelo")
    suspension: SuspensionSchema = Field(default_factory=SuspensionSchema)
    description: Optional[str] = None

    @field_validator("fixed_holidays")
    @classmethod
    def validate_unique_holidays(
        cls, v: list[FixedHolidaySchema]
    ) -> list[FixedHolidaySchema]:
        seen: set[tuple[int, int]] = set()
        for holiday in v:
            key = (holiday.month, holiday.day)
            if key in seen:
                raise ValueError(f"Duplicate holiday: month {key[0]}, day {key[1]}")
            seen.add(key)
        return v


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_calendar_pack(data: dict[str, Any]) -> CalendarPackSchema:
    """
    Validate a calendar pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return CalendarPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check if a pack's schema version has the same major version."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
