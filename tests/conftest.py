"""
Pytest configuration and fixtures for Scadenzario tests.

Provides calendars, configurations and an API client.
"""
import pytest
from datetime import date

from fastapi.testclient import TestClient

from scadenzario.api import create_app
from scadenzario.calendars import ITALIAN_CALENDAR, NoHolidayCalendar
from scadenzario.config import Settings
from scadenzario.engine import DeadlineCalculator
from scadenzario.models import MacroConfiguration, MacroType


# =============================================================================
# Factory Helpers
# =============================================================================

def make_config(
    macro_type: str = "171-ter",
    reference_date: str = "2025-10-15",
    include_suspension: bool = False,
) -> MacroConfiguration:
    """Create a MacroConfiguration from loose input."""
    return MacroConfiguration.create(macro_type, reference_date, include_suspension)


def by_label(results) -> dict[str, date]:
    """Map deadline labels to their dates."""
    return {r.label: r.result_date for r in results}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def italian_calendar():
    return ITALIAN_CALENDAR


@pytest.fixture
def weekend_only_calendar():
    """Calendar with weekends and the August window but no holidays."""
    return NoHolidayCalendar()


@pytest.fixture
def calculator():
    return DeadlineCalculator()


@pytest.fixture
def hearing_config():
    """171-ter macro for the hearing of Wednesday 15 October 2025."""
    return MacroConfiguration(
        macro_type=MacroType.ART_171_TER,
        reference_date=date(2025, 10, 15),
        include_suspension=False,
    )


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", include_suspension=True)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
