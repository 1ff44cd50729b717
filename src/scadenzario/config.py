"""
Scadenzario Configuration

Settings are read from SCADENZARIO_* environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from .calendars import ITALIAN_CALENDAR, StatutoryCalendar
from .models import DISPLAY_DATE_FORMAT, TRUE_VALUES

ENV_PREFIX = "SCADENZARIO_"


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    Attributes:
        log_level: Level for the "scadenzario" logger
        calendar_pack: Optional path to a calendar pack replacing the
            built-in Italian calendar
        include_suspension: Default suspension flag when a caller omits it
        date_format: strftime format for displayed dates
        docs_enabled: Expose OpenAPI docs in the HTTP API
    """
    log_level: str = "INFO"
    calendar_pack: Optional[str] = None
    include_suspension: bool = True
    date_format: str = DISPLAY_DATE_FORMAT
    docs_enabled: bool = True


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VALUES


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from an environment mapping (os.environ by default)."""
    env = os.environ if environ is None else environ

    def get(name: str) -> Optional[str]:
        return env.get(ENV_PREFIX + name)

    return Settings(
        log_level=(get("LOG_LEVEL") or "INFO").upper(),
        calendar_pack=get("CALENDAR_PACK") or None,
        include_suspension=_flag(get("INCLUDE_SUSPENSION"), True),
        date_format=get("DATE_FORMAT") or DISPLAY_DATE_FORMAT,
        docs_enabled=_flag(get("DOCS_ENABLED"), True),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return load_settings()


def build_calendar(settings: Settings) -> StatutoryCalendar:
    """Calendar selected by the settings."""
    if settings.calendar_pack:
        from .packs import load_calendar

        return load_calendar(settings.calendar_pack)
    return ITALIAN_CALENDAR
