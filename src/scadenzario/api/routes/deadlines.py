"""Deadline calculation endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from ...config import Settings
from ...engine import DeadlineCalculator, days_remaining, get_macro_definition, urgency_for_days
from ...models import DeadlineCalculationResult, MacroConfiguration, format_deadline_date
from ..dependencies import get_app_settings, get_calculator
from ..schemas.requests import CalculateRequest, PreviewRequest
from ..schemas.responses import CalculateResponse, DeadlineOut, PreviewEntryOut, PreviewResponse

router = APIRouter(prefix="/deadlines", tags=["Deadlines"])


def _configuration(request: CalculateRequest, settings: Settings) -> MacroConfiguration:
    include_suspension = request.include_suspension
    if include_suspension is None:
        include_suspension = settings.include_suspension
    return MacroConfiguration.create(request.macro_type, request.reference_date, include_suspension)


def _deadline_out(result: DeadlineCalculationResult, today: date, date_format: str) -> DeadlineOut:
    remaining = days_remaining(result.result_date, today)
    return DeadlineOut(
        label=result.label,
        description=result.description,
        result_date=result.result_date.isoformat(),
        display_date=format_deadline_date(result.result_date, date_format),
        offset_days=result.offset_days,
        days_remaining=remaining,
        urgency=urgency_for_days(remaining).value,
    )


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(
    request: CalculateRequest,
    calculator: DeadlineCalculator = Depends(get_calculator),
    settings: Settings = Depends(get_app_settings),
):
    """
    Calculate the sub-deadlines of a macro.

    Supported macro types: 171-ter, 189, 281-duodecies, appeal-long,
    appeal-short. Deadlines are returned in statutory order.
    """
    config = _configuration(request, settings)
    results = calculator.calculate(config)
    today = date.today()

    return CalculateResponse(
        macro_type=config.macro_type.value,
        title=get_macro_definition(config.macro_type).title,
        reference_date=config.reference_date.isoformat(),
        include_suspension=config.include_suspension,
        deadlines=[_deadline_out(r, today, settings.date_format) for r in results],
    )


@router.post("/preview", response_model=PreviewResponse)
async def preview(
    request: PreviewRequest,
    calculator: DeadlineCalculator = Depends(get_calculator),
    settings: Settings = Depends(get_app_settings),
):
    """
    Preview the sub-deadlines of a macro with user-chosen dates.

    Each override replaces the final date of the deadline with that label;
    the calculated date is returned alongside.
    """
    config = _configuration(request, settings)
    result = calculator.preview(config, request.overrides)

    return PreviewResponse(
        macro_type=config.macro_type.value,
        reference_date=config.reference_date.isoformat(),
        include_suspension=config.include_suspension,
        deadlines=[PreviewEntryOut(**e.to_dict()) for e in result.entries],
    )
