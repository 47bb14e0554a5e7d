"""
Session transcript writer.

Writes the ``.log`` transcripts the viewer reads: a ``=====`` header
banner, one ``[YYYY-MM-DD HH:MM:SS]``-prefixed entry per line, commands
marked with ``>``, and a footer banner with the session duration.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import TextIO

import structlog

from mt_common.models import LoggableWorld

logger = structlog.get_logger()

BANNER = "=" * 37
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FILENAME_FORMAT = "%Y-%m-%d_%H%M%S"
ROTATED_SUFFIX = ".rotated"


def safe_world_name(world: LoggableWorld) -> str:
    """Letters and digits of the world name, any script; everything else is dropped."""
    name = (world.name or "Unknown").replace(" ", "_")
    return "".join(c for c in name if c.isalnum())


def log_filename(world: LoggableWorld, when: datetime) -> str:
    return f"{safe_world_name(world)}_{when.strftime(FILENAME_FORMAT)}.log"


def format_duration(seconds: float) -> str:
    """``MM:SS``, or ``HH:MM:SS`` once an hour has passed."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def _iso_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class SessionLogger:
    """Appends one session's traffic to a log file.

    Args:
        log_dir: Directory to create log files in.
        auto_logging: Whether :meth:`start` proceeds without ``force``.
        rotate_bytes: Size past which :meth:`rotate_if_needed` rotates.
    """

    def __init__(self, log_dir: str | Path, auto_logging: bool = False, rotate_bytes: int = 50 * 1024 * 1024) -> None:
        self._log_dir = Path(log_dir)
        self._auto_logging = auto_logging
        self._rotate_bytes = rotate_bytes
        self._handle: TextIO | None = None
        self._path: Path | None = None
        self._world: LoggableWorld | None = None
        self._started: datetime | None = None

    @property
    def is_logging(self) -> bool:
        return self._handle is not None

    @property
    def can_start(self) -> bool:
        return self._auto_logging and not self.is_logging

    @property
    def path(self) -> Path | None:
        """The file currently being written, if any."""
        return self._path

    def start(self, world: LoggableWorld, force: bool = False) -> Path | None:
        """Open a new log file for *world* and write the header banner.

        Returns:
            The log file path, or ``None`` if logging did not start.
        """
        if self.is_logging:
            return self._path
        if not (force or self._auto_logging):
            logger.info("session_log_skipped", reason="auto_logging_disabled")
            return None

        now = datetime.now()
        path = self._log_dir / log_filename(world, now)
        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            self._handle = path.open("a", encoding="utf-8")
        except OSError as exc:
            logger.error("session_log_start_failed", path=str(path), error=str(exc))
            self._handle = None
            return None

        self._path = path
        self._world = world
        self._started = now
        self._write_raw(
            f"{BANNER}\n"
            "MUDTapper Session Log\n"
            f"World: {world.display_name}\n"
            f"Host: {world.display_host}\n"
            f"Started: {_iso_now()}\n"
            f"{BANNER}\n"
        )
        logger.info("session_log_started", path=str(path))
        return path

    def stop(self) -> None:
        """Write the footer banner and close the file."""
        if self._handle is None:
            return
        if self._started is not None:
            duration = (datetime.now() - self._started).total_seconds()
            self._write_raw(
                f"\n{BANNER}\n"
                f"Session ended: {_iso_now()}\n"
                f"Duration: {format_duration(duration)}\n"
                f"{BANNER}\n"
            )
        self._handle.close()
        logger.info("session_log_stopped", path=str(self._path))
        self._handle = None
        self._path = None
        self._world = None
        self._started = None

    def write(self, text: str) -> None:
        """Append *text* as one timestamped entry."""
        if self._handle is None:
            return
        stamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        entry = text if text.endswith("\n") else text + "\n"
        self._write_raw(f"[{stamp}] {entry}")

    def write_command(self, command: str) -> None:
        """Append an outgoing command entry."""
        self.write(f"> {command}")

    def write_received(self, text: str) -> None:
        """Append each non-empty line of received *text* as its own entry."""
        for line in text.splitlines():
            if line:
                self.write(line)

    def rotate_if_needed(self) -> Path | None:
        """Rotate the active log once it exceeds the size limit.

        The full file is renamed with a ``.rotated`` suffix and a fresh log
        is started for the same world.

        Returns:
            The rotated file path, or ``None`` if no rotation happened.
        """
        if self._handle is None or self._path is None or self._world is None:
            return None
        try:
            size = self._path.stat().st_size
        except OSError as exc:
            logger.error("session_log_stat_failed", path=str(self._path), error=str(exc))
            return None
        if size <= self._rotate_bytes:
            return None

        world, current = self._world, self._path
        logger.info("session_log_rotating", path=str(current), size=size)
        self.stop()
        rotated = current.with_name(current.name + ROTATED_SUFFIX)
        try:
            current.rename(rotated)
        except OSError as exc:
            logger.error("session_log_rotate_failed", path=str(current), error=str(exc))
            rotated = None
        self.start(world, force=True)
        return rotated

    def _write_raw(self, data: str) -> None:
        assert self._handle is not None
        self._handle.write(data)
        self._handle.flush()
