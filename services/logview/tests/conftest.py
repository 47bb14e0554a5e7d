"""Shared fixtures for log viewer tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mt_common.config import Settings

TS = "2024-01-01 00:00:00"


@pytest.fixture()
def log_dir(tmp_path: Path) -> Path:
    """An empty log directory."""
    path = tmp_path / "Logs"
    path.mkdir()
    return path


@pytest.fixture()
def settings(log_dir: Path) -> Settings:
    """Settings pointing at the temporary log directory with a small threshold."""
    return Settings(
        log_dir=log_dir,
        large_file_threshold_bytes=1024,
        window_lines=5,
        search_context_lines=1,
    )


@pytest.fixture()
def write_log(log_dir: Path) -> Callable[..., Path]:
    """Write a log file into the log directory and return its path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = log_dir / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
