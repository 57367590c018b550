"""
Variant Resolver — Structlog Configuration

The library itself only calls structlog.get_logger(); applications embedding
it call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from variant_resolver.config import settings


def configure_logging(log_level: str | None = None, json_output: bool | None = None) -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to
                   settings.LOG_LEVEL.
        json_output: Render JSON lines when True, console output otherwise.
                     Defaults to settings.LOG_JSON.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_output is None else json_output

    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name),
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
