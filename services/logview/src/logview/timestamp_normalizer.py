"""
Timestamp repair for concatenated session transcript lines.

Session logs sometimes contain several ``[YYYY-MM-DD HH:MM:SS]``-prefixed
entries written back-to-back with no line break between them. This module
inserts the missing breaks so every timestamp marker starts its own line.
"""

from __future__ import annotations

import re
from functools import lru_cache

import structlog

from logview.errors import PatternEngineUnavailableError

logger = structlog.get_logger()

TIMESTAMP_PATTERN = r"\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]"


@lru_cache(maxsize=4)
def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternEngineUnavailableError(f"Invalid timestamp pattern {pattern!r}: {exc}") from exc


def insertion_points(text: str, pattern: str = TIMESTAMP_PATTERN) -> list[int]:
    """Return offsets in *text* where a line break must be inserted.

    Offsets are collected against the original text, ascending. A marker at
    offset 0 or directly after ``\\n`` needs no break.

    Raises:
        PatternEngineUnavailableError: If *pattern* does not compile.
    """
    regex = _compile(pattern)
    return [
        m.start()
        for m in regex.finditer(text)
        if m.start() > 0 and text[m.start() - 1] != "\n"
    ]


def normalize(text: str, pattern: str = TIMESTAMP_PATTERN) -> str:
    """Insert a line break before every timestamp marker not starting a line.

    All insertion points are located first, then applied from last to first
    so earlier offsets stay valid. Repair is best effort: if the pattern
    cannot be compiled the text is returned unchanged.

    Args:
        text: Decoded transcript text.
        pattern: Timestamp marker regex.

    Returns:
        The repaired text. Applying ``normalize`` again returns it unchanged.
    """
    try:
        points = insertion_points(text, pattern)
    except PatternEngineUnavailableError as exc:
        logger.warning("timestamp_repair_skipped", error=str(exc))
        return text

    if not points:
        return text

    chunks: list[str] = []
    end = len(text)
    for point in reversed(points):
        chunks.append(text[point:end])
        chunks.append("\n")
        end = point
    chunks.append(text[:end])
    repaired = "".join(reversed(chunks))
    logger.debug("timestamp_repair_applied", inserted=len(points))
    return repaired


def extract_timestamp(line: str, pattern: str = TIMESTAMP_PATTERN) -> str | None:
    """Return the inner text of the first timestamp marker in *line*, if any."""
    try:
        regex = _compile(pattern)
    except PatternEngineUnavailableError:
        return None
    m = regex.search(line)
    return m.group(1) if m else None
