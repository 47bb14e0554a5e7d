"""
Semantic line classification for session transcripts.

Each repaired transcript line is one of five kinds. The rules are checked
in a fixed order, so every line, the empty string included, gets exactly
one kind.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

BANNER_MARKER = "====="
COMMAND_MARKER = "] >"
TIMESTAMP_OPEN = "["
TIMESTAMP_CLOSE = "]"


class LineKind(str, enum.Enum):
    """Semantic kind of a transcript line."""

    BANNER = "banner"
    OUTGOING_COMMAND = "outgoing_command"
    TIMESTAMPED_EVENT = "timestamped_event"
    BLANK = "blank"
    PLAIN = "plain"


@dataclass(frozen=True)
class ClassifiedLine:
    """One document line with its kind.

    Attributes:
        number: 1-based line number within the document.
        text: The line text, without its trailing newline.
        kind: The classified :class:`LineKind`.
        is_first: Whether this is the first line of the document.
        is_last: Whether this is the last line of the document.
    """

    number: int
    text: str
    kind: LineKind
    is_first: bool = False
    is_last: bool = False


def classify(line: str, is_first: bool = False, is_last: bool = False) -> LineKind:
    """Return the :class:`LineKind` of *line*.

    Precedence: banner, outgoing command, timestamped event, blank, plain.
    The position flags are accepted for callers that track them; no current
    rule depends on them.
    """
    if line.startswith(BANNER_MARKER):
        return LineKind.BANNER
    if COMMAND_MARKER in line:
        return LineKind.OUTGOING_COMMAND
    if line.startswith(TIMESTAMP_OPEN) and TIMESTAMP_CLOSE in line[1:]:
        return LineKind.TIMESTAMPED_EVENT
    if not line.strip():
        return LineKind.BLANK
    return LineKind.PLAIN


def classify_lines(lines: Sequence[str]) -> Iterator[ClassifiedLine]:
    """Classify every line of a document, numbering from 1."""
    last = len(lines)
    for number, text in enumerate(lines, start=1):
        is_first = number == 1
        is_last = number == last
        yield ClassifiedLine(
            number=number,
            text=text,
            kind=classify(text, is_first=is_first, is_last=is_last),
            is_first=is_first,
            is_last=is_last,
        )
