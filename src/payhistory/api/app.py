"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from payhistory.api.routes import health, metrics, records
from payhistory.core.config import AppSettings
from payhistory.core.exceptions import ParseError
from payhistory.core.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings and configure logging for the app's lifetime."""
    settings = AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": exc.to_payload()})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Pay History Analyzer",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(ParseError, parse_error_handler)
    app.include_router(health.router)
    app.include_router(records.router, prefix="/records")
    app.include_router(metrics.router, prefix="/metrics")
    return app
