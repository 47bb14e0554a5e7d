"""
FastAPI dependency providers for the log viewer service.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends, HTTPException

from mt_common.config import Settings, get_settings


def get_app_settings() -> Settings:
    """Return the process settings (overridable in tests)."""
    return get_settings()


def get_log_dir(settings: Settings = Depends(get_app_settings)) -> Path:
    """Return the configured log directory."""
    return Path(settings.log_dir)


def resolve_log_path(name: str, log_dir: Path = Depends(get_log_dir)) -> Path:
    """Map a log name to a file inside the log directory.

    Raises:
        HTTPException: 404 if the name escapes the directory or no such file exists.
    """
    root = log_dir.resolve()
    path = (root / name).resolve()
    if path.parent != root or not path.is_file():
        raise HTTPException(status_code=404, detail="Log not found")
    return path
