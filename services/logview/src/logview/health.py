"""
Health check endpoint for the log viewer service.

Reports whether the configured log directory is available.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends

from logview.dependencies import get_log_dir

router = APIRouter()


@router.get("/health")
async def health(log_dir: Path = Depends(get_log_dir)) -> dict[str, object]:
    """Return service health and log directory availability."""
    available = log_dir.is_dir()
    return {
        "service": "logview",
        "status": "ok" if available else "degraded",
        "log_dir_available": available,
    }
