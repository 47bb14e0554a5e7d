"""
Request logging middleware for the log viewer service.

Binds the request method, path and, for per-log routes, the log name into
structlog's contextvars for the lifetime of the request, so every event the
viewer logs while serving it carries them. The request itself is logged
once with its status and latency.
"""

from __future__ import annotations

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger(__name__)

LOGS_PATH = "/api/v1/logs/"
RESERVED_NAMES = frozenset({"search"})


def log_name_from_path(path: str) -> str | None:
    """Log file name addressed by *path*, or ``None`` for other routes."""
    if not path.startswith(LOGS_PATH):
        return None
    name = path[len(LOGS_PATH):].split("/", 1)[0]
    if not name or name in RESERVED_NAMES:
        return None
    return name


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind request context and log every request with its status and latency."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        context: dict[str, object] = {
            "method": request.method,
            "path": request.url.path,
        }
        name = log_name_from_path(request.url.path)
        if name is not None:
            context["log"] = name

        with structlog.contextvars.bound_contextvars(**context):
            start = time.monotonic()
            response = await call_next(request)
            logger.info(
                "http_request",
                status=response.status_code,
                duration_ms=round((time.monotonic() - start) * 1000, 2),
            )
        return response
