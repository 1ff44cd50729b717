"""
Scadenzario API

HTTP surface of the procedural deadline engine.

Run:
    uvicorn scadenzario.api.main:app --reload
"""

import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, build_calendar, get_settings
from ..engine import DeadlineCalculator
from ..exceptions import (
    InvalidDateInput,
    InvalidDayCount,
    InvalidFlagValue,
    ScadenzarioError,
    UnknownDeadlineLabel,
    UnsupportedMacroType,
)
from .routes import calendar, deadlines, macros
from .schemas.responses import HealthResponse

logger = logging.getLogger("scadenzario")


# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        for key in ("method", "path", "status_code", "duration_ms", "error_code"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: str) -> None:
    """Install the JSON handler on the package logger (once)."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)


# =============================================================================
# Error Mapping
# =============================================================================

ERROR_STATUS: dict[type, int] = {
    UnsupportedMacroType: 400,
    InvalidDateInput: 400,
    InvalidDayCount: 422,
    InvalidFlagValue: 400,
    UnknownDeadlineLabel: 404,
}


def status_for(error: ScadenzarioError) -> int:
    """HTTP status for a domain error (500 for anything unmapped)."""
    for error_type, status in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


async def scadenzario_error_handler(request: Request, exc: ScadenzarioError):
    status = status_for(exc)
    logger.warning(
        "Request failed: %s", exc.message,
        extra={"path": request.url.path, "status_code": status, "error_code": exc.code},
    )
    return JSONResponse(status_code=status, content=exc.to_dict())


# =============================================================================
# FastAPI App
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings (environment by default)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    cal = build_calendar(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Scadenzario API started (calendar=%s, default suspension=%s)",
            cal.config.id, settings.include_suspension,
        )
        yield

    app = FastAPI(
        title="Scadenzario",
        description="""
## Italian civil procedure deadline engine

Computes the statutory deadlines of a procedural step from its reference date.

### Supported macros
- **171-ter**: integrative briefs (40/20/10 days before the hearing)
- **189**: final briefs (60/30/10 days before the hearing)
- **281-duodecies**: simplified procedure briefs (30/10 days before the hearing)
- **appeal-long**: appeal, 6 months from publication
- **appeal-short**: appeal, 30 days from notification

### Counting
Calendar days; the August suspension counts as one day when enabled;
a non-working endpoint is moved to the nearest working day.
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )

    app.state.settings = settings
    app.state.calendar = cal
    app.state.calculator = DeadlineCalculator(calendar=cal)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        logger.info(
            "%s %s", request.method, request.url.path,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": int((time.time() - start_time) * 1000),
            },
        )
        return response

    app.add_exception_handler(ScadenzarioError, scadenzario_error_handler)

    app.include_router(macros.router)
    app.include_router(deadlines.router)
    app.include_router(calendar.router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        """Liveness check."""
        return HealthResponse(
            status="ok",
            version=__version__,
            calendar_id=cal.config.id,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
