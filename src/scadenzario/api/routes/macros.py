"""Macro catalogue endpoints."""

from fastapi import APIRouter

from ...engine import get_macro_definition, list_macro_types
from ..schemas.responses import MacroSummary

router = APIRouter(prefix="/macros", tags=["Macros"])


@router.get("", response_model=list[MacroSummary])
async def list_macros():
    """List the supported macro types and their sub-deadlines."""
    return [MacroSummary(**d.to_dict()) for d in list_macro_types()]


@router.get("/{macro_type}", response_model=MacroSummary)
async def get_macro(macro_type: str):
    """Get one macro type. Accepts the Italian aliases (e.g. appello-lungo)."""
    return MacroSummary(**get_macro_definition(macro_type).to_dict())
