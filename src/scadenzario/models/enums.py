"""
Scadenzario Enumerations

All enumeration types used throughout the Scadenzario system.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


# =============================================================================
# Macro Types
# =============================================================================

class MacroType(str, Enum):
    """
    Statutory macro deadlines supported by the engine.

    The set is closed: every member must have a definition in the
    deadline set builders, which check coverage at import time.
    """
    ART_171_TER = "171-ter"
    ART_189 = "189"
    ART_281_DUODECIES = "281-duodecies"
    APPEAL_LONG = "appeal-long"
    APPEAL_SHORT = "appeal-short"

    @classmethod
    def _missing_(cls, value: object) -> Optional[MacroType]:
        # Italian identifiers used by existing records
        if isinstance(value, str):
            key = value.strip().lower()
            aliases = {
                "appello-lungo": cls.APPEAL_LONG,
                "appello-breve": cls.APPEAL_SHORT,
                "171ter": cls.ART_171_TER,
                "281duodecies": cls.ART_281_DUODECIES,
            }
            if key in aliases:
                return aliases[key]
            for member in cls:
                if member.value == key:
                    return member
        return None


# =============================================================================
# Counting Methods
# =============================================================================

class CountMethod(str, Enum):
    """How a sub-deadline is derived from the reference date."""
    DAYS_BACKWARD = "days_backward"    # Calendar days before the hearing
    DAYS_FORWARD = "days_forward"      # Calendar days after notification
    MONTHS_FORWARD = "months_forward"  # Calendar months after publication


# =============================================================================
# Reference Date Kinds
# =============================================================================

class ReferenceDateKind(str, Enum):
    """What the reference date of a macro represents."""
    HEARING = "hearing"
    PUBLICATION = "publication"
    NOTIFICATION = "notification"


# =============================================================================
# Urgency
# =============================================================================

class Urgency(str, Enum):
    """Urgency band of a deadline relative to today."""
    EXPIRED = "expired"      # Past deadline
    URGENT = "urgent"        # Within 7 days
    UPCOMING = "upcoming"    # Within 14 days
    NORMAL = "normal"
