"""
Log viewer service entry point.

Builds the FastAPI application: log routers under ``/api/v1``, ``/health``
at the root, request logging and the Prometheus ``/metrics`` endpoint.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from mt_common.config import get_settings
from mt_common.logging import configure_logging

from logview import health
from logview.middleware import LoggingMiddleware
from logview.routers import logs

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and report the log directory."""
    settings = get_settings()
    configure_logging()
    logger.info("logview_startup", log_dir=str(settings.log_dir))
    yield
    logger.info("logview_shutdown")


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(title="MUDTapper Log Viewer", version="0.1.0", lifespan=lifespan)
    app.include_router(logs.router, prefix="/api/v1")
    app.include_router(health.router)
    app.mount("/metrics", make_asgi_app())
    app.add_middleware(LoggingMiddleware)
    return app


app = create_app()


def main() -> None:
    """Run the log viewer service with Uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "logview.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
