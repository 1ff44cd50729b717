"""
Scadenzario Calendar Packs

Schema validation and loading for calendar packs.

Calendar packs are YAML or JSON files that define the holiday table and
the suspension window of a jurisdiction. The built-in pack
`data/italy.yaml` matches `scadenzario.calendars.ITALIAN_CONFIG`.

Usage:
    from scadenzario.packs import load_calendar, load_calendar_pack

    config = load_calendar_pack("path/to/pack.yaml")
    calendar = load_calendar("path/to/pack.yaml")
"""
from __future__ import annotations

from .loader import (
    DEFAULT_PACK_PATH,
    CalendarPackLoader,
    load_calendar,
    load_calendar_pack,
    load_calendar_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    CalendarPackSchema,
    FixedHolidaySchema,
    SuspensionSchema,
    check_schema_version,
    validate_calendar_pack,
)

__all__ = [
    "SCHEMA_VERSION",
    "DEFAULT_PACK_PATH",
    # Loader
    "CalendarPackLoader",
    "load_calendar",
    "load_calendar_pack",
    "load_calendar_pack_from_string",
    # Validation
    "validate_calendar_pack",
    "check_schema_version",
    "CalendarPackSchema",
    "FixedHolidaySchema",
    "SuspensionSchema",
]
