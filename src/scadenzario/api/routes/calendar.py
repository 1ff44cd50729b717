"""Calendar endpoints."""

from datetime import MAXYEAR, MINYEAR, date

from fastapi import APIRouter, Depends, Path

from ...calendars import StatutoryCalendar
from ...models import weekday_abbreviation
from ..dependencies import get_calendar
from ..schemas.responses import DayCheckResponse, HolidayOut, HolidaysResponse

router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.get("/holidays/{year}", response_model=HolidaysResponse)
async def list_holidays(
    year: int = Path(..., ge=MINYEAR, le=MAXYEAR),
    calendar: StatutoryCalendar = Depends(get_calendar),
):
    """List the named holidays of a year, sorted by date."""
    return HolidaysResponse(
        year=year,
        calendar_id=calendar.config.id,
        holidays=[
            HolidayOut(date=d.isoformat(), name=name, weekday=weekday_abbreviation(d))
            for d, name in calendar.holidays_for_year(year)
        ],
    )


@router.get("/check/{day}", response_model=DayCheckResponse)
async def check_day(day: date, calendar: StatutoryCalendar = Depends(get_calendar)):
    """Holiday, weekend and suspension flags of a single day."""
    return DayCheckResponse(
        date=day.isoformat(),
        weekday=weekday_abbreviation(day),
        is_weekend=calendar.is_weekend(day),
        is_holiday=calendar.is_holiday(day),
        holiday_name=calendar.get_holiday_name(day),
        is_in_suspension=calendar.is_in_suspension(day),
        is_working_day=calendar.is_working_day(day),
        is_working_day_with_suspension=calendar.is_working_day(day, include_suspension=True),
    )
