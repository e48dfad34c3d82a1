"""Request-scoped dependencies."""

from __future__ import annotations

from fastapi import Request

from payhistory.core.config import AppSettings


def get_settings(request: Request) -> AppSettings:
    """Settings loaded by the lifespan, or fresh defaults when it has not run."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else AppSettings()
