"""Request schemas for the API."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class CalculateRequest(BaseModel):
    """Request to calculate the deadlines of a macro."""
    macro_type: str = Field(..., description="171-ter|189|281-duodecies|appeal-long|appeal-short")
    reference_date: date = Field(..., description="Hearing, publication or notification date (YYYY-MM-DD)")
    include_suspension: Optional[bool] = Field(
        default=None,
        description="Apply the August suspension period (server default when omitted)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"macro_type": "171-ter", "reference_date": "2025-10-15", "include_suspension": False},
                {"macro_type": "appeal-long", "reference_date": "2025-08-10", "include_suspension": True},
            ]
        }
    }


class PreviewRequest(CalculateRequest):
    """Request to preview deadlines with user-chosen replacement dates."""
    overrides: dict[str, date] = Field(
        default={},
        description="Replacement dates keyed by deadline label",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "macro_type": "171-ter",
                    "reference_date": "2025-10-15",
                    "include_suspension": False,
                    "overrides": {"MEMORIA 171-TER 3° TERMINE": "2025-10-02"},
                }
            ]
        }
    }
