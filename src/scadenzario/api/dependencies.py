"""Per-application state shared with the routes (set by main.create_app)."""

from fastapi import Request

from ..calendars import StatutoryCalendar
from ..config import Settings
from ..engine import DeadlineCalculator


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_calculator(request: Request) -> DeadlineCalculator:
    return request.app.state.calculator


def get_calendar(request: Request) -> StatutoryCalendar:
    return request.app.state.calendar
