"""
Scadenzario Calendar Pack Loader

Loads and validates calendar packs from YAML or JSON files.

Converts Pydantic schema models to immutable calendar configurations.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars import CalendarConfig, FixedHoliday, StatutoryCalendar, SuspensionWindow
from ..exceptions import (
    CalendarPackLoadError,
    CalendarPackValidationError,
    CalendarPackVersionMismatch,
)
from .schema import SCHEMA_VERSION, CalendarPackSchema, check_schema_version, validate_calendar_pack

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_PACK_PATH = DATA_DIR / "italy.yaml"


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_calendar_pack(schema: CalendarPackSchema) -> CalendarConfig:
    """Convert CalendarPackSchema to CalendarConfig."""
    return CalendarConfig(
        id=schema.id,
        name=schema.name,
        jurisdiction=schema.jurisdiction,
        fixed_holidays=tuple(
            FixedHoliday(month=h.month, day=h.day, name=h.name)
            for h in schema.fixed_holidays
        ),
        easter_monday=schema.easter_monday,
        easter_monday_name=schema.easter_monday_name,
        suspension=SuspensionWindow(
            month=schema.suspension.month,
            first_day=schema.suspension.first_day,
            last_day=schema.suspension.last_day,
        ),
    )


def _parse_content(content: str, format: str) -> Any:
    if format.lower() == "json":
        return json.loads(content)
    return yaml.safe_load(content)


# =============================================================================
# Calendar Pack Loader
# =============================================================================

class CalendarPackLoader:
    """
    Loads calendar packs from YAML or JSON files.

    Usage:
        loader = CalendarPackLoader()
        config = loader.load("path/to/pack.yaml")
        calendar = loader.get_calendar(config.id)
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._configs: dict[str, CalendarConfig] = {}

    def load(self, path: Union[str, Path]) -> CalendarConfig:
        """
        Load a calendar pack from a file.

        Raises:
            CalendarPackLoadError: If file cannot be read
            CalendarPackValidationError: If validation fails
            CalendarPackVersionMismatch: If schema version incompatible
        """
        path = Path(path)
        try:
            data = self._load_file(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CalendarPackLoadError(
                message=f"Failed to load calendar pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        config = self.load_data(data, source=str(path))
        logger.info("Loaded calendar pack %s from %s", config.id, path)
        return config

    def load_string(self, content: str, format: str = "yaml") -> CalendarConfig:
        """Load a calendar pack from a YAML or JSON string."""
        try:
            data = _parse_content(content, format)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise CalendarPackLoadError(
                message=f"Failed to parse calendar pack: {e}",
                details={"format": format, "error": str(e)},
            ) from e
        return self.load_data(data, source="<string>")

    def load_data(self, data: Any, source: str = "") -> CalendarConfig:
        """Validate an already parsed pack and cache the result."""
        if not isinstance(data, dict):
            raise CalendarPackValidationError(
                message="Calendar pack must be a mapping",
                details={"source": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise CalendarPackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                    "source": source,
                },
            )

        try:
            schema = validate_calendar_pack(data)
        except ValidationError as e:
            raise CalendarPackValidationError(
                message=f"Calendar pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False), "source": source},
            ) from e

        config = _convert_calendar_pack(schema)
        self._configs[config.id] = config
        return config

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_config(self, pack_id: str) -> Optional[CalendarConfig]:
        """Get a cached configuration by ID."""
        return self._configs.get(pack_id)

    def get_calendar(self, pack_id: str) -> Optional[StatutoryCalendar]:
        """Get a calendar for a cached configuration."""
        config = self._configs.get(pack_id)
        return StatutoryCalendar.from_config(config) if config else None

    def list_packs(self) -> list[str]:
        """List IDs of all loaded packs."""
        return list(self._configs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_calendar_pack(path: Union[str, Path]) -> CalendarConfig:
    """Load a calendar pack from a file."""
    return CalendarPackLoader().load(path)


def load_calendar_pack_from_string(content: str, format: str = "yaml") -> CalendarConfig:
    """Load a calendar pack from a YAML or JSON string."""
    return CalendarPackLoader().load_string(content, format)


def load_calendar(path: Optional[Union[str, Path]] = None) -> StatutoryCalendar:
    """Build a calendar from a pack file (the built-in Italian pack by default)."""
    return StatutoryCalendar.from_config(load_calendar_pack(path or DEFAULT_PACK_PATH))
