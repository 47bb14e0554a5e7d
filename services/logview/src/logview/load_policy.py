"""
Size-aware load policy for session transcripts.

Transcripts below the size threshold are loaded whole. At or above it the
caller is offered a choice between the full file and a window of the first
or last N lines, so a huge log never has to be processed unasked.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import structlog

from mt_common.config import MIB

logger = structlog.get_logger()

DEFAULT_THRESHOLD_BYTES: int = 5 * MIB
DEFAULT_WINDOW_LINES: int = 1000


def logical_lines(text: str) -> list[str]:
    r"""Split on ``\n`` only; a trailing newline does not start a line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LoadMode(str, enum.Enum):
    """Outcome of the size check."""

    FULL_LOAD = "full_load"
    WINDOW_CHOICE = "window_choice"


class WindowOption(str, enum.Enum):
    """How much of a large transcript to materialise."""

    FULL = "full"
    LAST = "last"
    FIRST = "first"


@dataclass(frozen=True)
class LoadDecision:
    """Result of :meth:`LoadPolicy.decide`.

    Attributes:
        mode: Whether the transcript loads directly or needs a choice.
        byte_size: Transcript size the decision was made on.
        options: Window options to offer; empty for a full load.
    """

    mode: LoadMode
    byte_size: int
    options: tuple[WindowOption, ...] = field(default_factory=tuple)

    @property
    def size_mib(self) -> float:
        return self.byte_size / MIB


class LoadPolicy:
    """Decides between a full load and a windowed load, and builds windows.

    Args:
        threshold_bytes: Size at or above which a window choice is offered.
        window_lines: Number of lines in a first/last window.
    """

    def __init__(
        self,
        threshold_bytes: int = DEFAULT_THRESHOLD_BYTES,
        window_lines: int = DEFAULT_WINDOW_LINES,
    ) -> None:
        if threshold_bytes < 1:
            raise ValueError("threshold_bytes must be positive")
        if window_lines < 1:
            raise ValueError("window_lines must be positive")
        self._threshold_bytes = threshold_bytes
        self._window_lines = window_lines

    @property
    def window_lines(self) -> int:
        return self._window_lines

    def decide(self, byte_size: int) -> LoadDecision:
        """Return the load decision for a transcript of *byte_size* bytes."""
        if byte_size < self._threshold_bytes:
            return LoadDecision(mode=LoadMode.FULL_LOAD, byte_size=byte_size)
        logger.info(
            "load_policy_window_offered",
            byte_size=byte_size,
            threshold=self._threshold_bytes,
        )
        return LoadDecision(
            mode=LoadMode.WINDOW_CHOICE,
            byte_size=byte_size,
            options=(WindowOption.FULL, WindowOption.LAST, WindowOption.FIRST),
        )

    def apply(self, text: str, option: WindowOption) -> str:
        """Materialise *option* over already-decoded *text*.

        Lines are counted logically; a trailing newline does not add an
        empty line. Windowed output carries a one-line summary banner,
        before the window for ``LAST`` and after it for ``FIRST``.
        """
        if option is WindowOption.FULL:
            return text

        lines = logical_lines(text)
        total = len(lines)
        if option is WindowOption.LAST:
            window = lines[-self._window_lines:]
            banner = f"... (showing last {len(window)} lines of {total} total lines)"
            result = [banner, *window]
        else:
            window = lines[: self._window_lines]
            banner = f"... (showing first {len(window)} lines of {total} total lines)"
            result = [*window, banner]

        logger.info("load_policy_window_applied", option=option.value, shown=len(window), total=total)
        return "\n".join(result)
