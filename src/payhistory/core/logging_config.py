"""Structured logging configuration.

Modules log event names with keyword fields, e.g.
``_LOGGER.warning("segment_skipped", date_token="01/15/2023", reason="invalid_date")``.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON event pipeline at the given level.

    Args:
        level: Standard level name (DEBUG, INFO, WARNING, ...).
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
    """
    return structlog.get_logger(name)
