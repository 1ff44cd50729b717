"""
Calendar date coercion.

Deadlines are computed at day granularity: every input is reduced to a
plain `datetime.date` before any arithmetic.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from ..exceptions import InvalidDateInput


DISPLAY_DATE_FORMAT = "%d/%m/%Y"

# Extended ISO calendar date only (no basic or week-date forms)
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def to_calendar_date(value: Any, field_name: str = "reference_date") -> date:
    """
    Coerce a value to a calendar date.

    Accepts `date`, `datetime` (time of day is dropped) and ISO
    `YYYY-MM-DD` strings.

    Raises:
        InvalidDateInput: If the value is not a well-formed calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _ISO_DATE.fullmatch(text):
            raise InvalidDateInput(
                message=f"Invalid {field_name}: {value!r} is not an ISO date (YYYY-MM-DD)",
                details={"field": field_name, "value": value},
            )
        try:
            return date.fromisoformat(text)
        except ValueError as e:
            raise InvalidDateInput(
                message=f"Invalid {field_name}: {value!r} is not a calendar date",
                details={"field": field_name, "value": value, "error": str(e)},
            ) from e
    raise InvalidDateInput(
        message=f"Invalid {field_name}: expected a date, got {type(value).__name__}",
        details={"field": field_name, "value": repr(value)},
    )


def format_deadline_date(d: date, fmt: str = DISPLAY_DATE_FORMAT) -> str:
    """Format a deadline date for display (dd/mm/yyyy by default)."""
    return d.strftime(fmt)


_WEEKDAYS = ("Lun", "Mar", "Mer", "Gio", "Ven", "Sab", "Dom")


def weekday_abbreviation(d: date) -> str:
    """Italian three-letter weekday name (Lun..Dom)."""
    return _WEEKDAYS[d.weekday()]
