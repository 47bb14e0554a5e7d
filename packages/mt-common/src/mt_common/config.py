"""
Environment-based configuration management for the MUDTapper log viewer.

Uses pydantic-settings to load configuration values from environment
variables and .env files. The log viewer service and its helpers import
their settings from this module to keep configuration handling consistent.

All environment variables are prefixed with ``MT_`` to avoid collisions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIB = 1024 * 1024

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Central configuration loaded from ``MT_``-prefixed environment variables.

    Attributes:
        log_dir: Directory holding ``*.log`` session transcripts.
        large_file_threshold_bytes: Transcript size at which a window choice
            is offered instead of a full load.
        window_lines: Number of lines in a first/last window.
        search_context_lines: Lines of context around each cross-log hit.
        auto_logging: Whether session logging starts without being forced.
        rotate_bytes: Size at which an active session log is rotated.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Render log lines as JSON instead of console text.
        api_host: Bind address for the HTTP service.
        api_port: Bind port for the HTTP service.
    """

    model_config = SettingsConfigDict(
        env_prefix="MT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Transcripts ──
    log_dir: Path = Field(
        default=Path.home() / "MUDTapper" / "Logs",
        description="Directory holding session transcripts.",
    )

    # ── Load policy ──
    large_file_threshold_bytes: int = Field(
        default=5 * MIB,
        ge=1,
        description="Transcript size at which a window choice is offered.",
    )
    window_lines: int = Field(default=1000, ge=1, description="Lines per first/last window.")

    # ── Search ──
    search_context_lines: int = Field(
        default=2,
        ge=0,
        description="Context lines around each cross-log search hit.",
    )

    # ── Session logging ──
    auto_logging: bool = Field(default=False, description="Start session logs automatically.")
    rotate_bytes: int = Field(
        default=50 * MIB,
        ge=1,
        description="Size at which an active session log is rotated.",
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Logging level.")
    log_json: bool = Field(default=True, description="Render logs as JSON.")

    # ── API ──
    api_host: str = Field(default="0.0.0.0", description="HTTP service bind address.")
    api_port: int = Field(default=8010, ge=1, le=65535, description="HTTP service bind port.")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings singleton.

    Returns:
        The global ``Settings`` instance.
    """
    return Settings()
