"""
Read-once transcript source.

A transcript is the unmodified session log file. Its byte size is known as
soon as it is opened, before any decoding, so the load policy can decide
how much of it to process.
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path

import structlog

from logview.errors import SourceUnreadableError

logger = structlog.get_logger()


class Transcript:
    """An opened session log file.

    Use :meth:`open` rather than the constructor so a missing or
    unreadable file fails before any other work is done.

    Args:
        path: Location of the log file.
        byte_size: Size of the file in bytes.
    """

    def __init__(self, path: Path, byte_size: int) -> None:
        self._path = path
        self._byte_size = byte_size

    @classmethod
    def open(cls, path: str | Path) -> Transcript:
        """Stat *path* and return a transcript handle.

        Raises:
            SourceUnreadableError: If the file does not exist or is not a file.
        """
        path = Path(path)
        try:
            stat = path.stat()
        except OSError as exc:
            raise SourceUnreadableError(path, exc.strerror or str(exc)) from exc
        if not path.is_file():
            raise SourceUnreadableError(path, "not a regular file")
        return cls(path, stat.st_size)

    @property
    def path(self) -> Path:
        """The original file, for verbatim export."""
        return self._path

    @property
    def byte_size(self) -> int:
        return self._byte_size

    @cached_property
    def text(self) -> str:
        """The decoded content with ``\\r\\n`` and ``\\r`` folded to ``\\n``.

        Raises:
            SourceUnreadableError: If the file cannot be read or is not UTF-8.
        """
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise SourceUnreadableError(self._path, exc.strerror or str(exc)) from exc
        try:
            decoded = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SourceUnreadableError(self._path, f"not valid UTF-8 ({exc.reason})") from exc
        logger.debug("transcript_decoded", path=str(self._path), bytes=len(raw))
        return decoded.replace("\r\n", "\n").replace("\r", "\n")
