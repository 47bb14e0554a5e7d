"""
Structured logging setup for the MUDTapper log viewer.

Configures structlog for JSON-formatted structured logging. Every log line
includes timestamp, level and event; per-request context (method, path, log
name) is bound by the service middleware through contextvars.
"""

from __future__ import annotations

import logging

import structlog

from mt_common.config import get_settings


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog for the current process.

    Args:
        level: Logging level name; defaults to ``Settings.log_level``.
        json: Render JSON lines; defaults to ``Settings.log_json``.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json is None else json

    renderer: structlog.types.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name),
        ),
        cache_logger_on_first_use=False,
    )
