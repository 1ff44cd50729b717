"""Response schemas for the API."""

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness check response."""
    status: str
    version: str
    calendar_id: str
    timestamp: str


class RuleSummary(BaseModel):
    """One sub-deadline of a macro type."""
    label: str
    description: str
    method: str  # days_backward|days_forward|months_forward
    amount: int
    offset_days: int


class MacroSummary(BaseModel):
    """Catalogue entry of a macro type."""
    macro_type: str
    title: str
    reference_date_kind: str  # hearing|publication|notification
    deadlines: list[RuleSummary]


class DeadlineOut(BaseModel):
    """A computed sub-deadline."""
    label: str
    description: str
    result_date: str
    display_date: str
    offset_days: int
    days_remaining: int
    urgency: str  # expired|urgent|upcoming|normal


class CalculateResponse(BaseModel):
    """Response from a deadline calculation."""
    macro_type: str
    title: str
    reference_date: str
    include_suspension: bool
    deadlines: list[DeadlineOut]


class PreviewEntryOut(BaseModel):
    """A previewed deadline with its optional replacement date."""
    label: str
    description: str
    offset_days: int
    calculated_date: str
    final_date: str
    overridden: bool


class PreviewResponse(BaseModel):
    """Response from a deadline preview."""
    macro_type: str
    reference_date: str
    include_suspension: bool
    deadlines: list[PreviewEntryOut]


class HolidayOut(BaseModel):
    """A named holiday."""
    date: str
    name: str
    weekday: str


class HolidaysResponse(BaseModel):
    """Holidays of a year."""
    year: int
    calendar_id: str
    holidays: list[HolidayOut]


class DayCheckResponse(BaseModel):
    """Calendar flags of a single day."""
    date: str
    weekday: str
    is_weekend: bool
    is_holiday: bool
    holiday_name: Optional[str] = None
    is_in_suspension: bool
    is_working_day: bool
    is_working_day_with_suspension: bool


class ErrorResponse(BaseModel):
    """Error payload."""
    code: str
    message: str
    details: Optional[dict] = None
