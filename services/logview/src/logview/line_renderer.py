"""
Span segmentation for classified transcript lines.

Rendering here means splitting a line into ordered sub-spans, each tagged
with a presentation role. Concatenating the span texts always reproduces
the line exactly; presentation (colours, weights) is left to the client.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from logview.errors import MalformedDelimiterError
from logview.line_classifier import COMMAND_MARKER, TIMESTAMP_CLOSE, LineKind

logger = structlog.get_logger()


class SpanRole(str, enum.Enum):
    """Presentation role of a rendered span."""

    TIMESTAMP = "timestamp"
    COMMAND = "command"
    CONTENT = "content"
    BANNER_TEXT = "banner_text"
    FILLER = "filler"


@dataclass(frozen=True)
class RenderedSpan:
    """A slice of a line with its role.

    Attributes:
        text: The slice of the original line.
        role: Presentation role.
    """

    text: str
    role: SpanRole

    @property
    def display_text(self) -> str:
        """Text to draw; an empty filler is drawn as one space."""
        if self.role is SpanRole.FILLER and not self.text:
            return " "
        return self.text


def _split_after(line: str, delimiter: str, head: SpanRole, tail: SpanRole) -> list[RenderedSpan]:
    idx = line.find(delimiter)
    if idx < 0:
        raise MalformedDelimiterError(f"missing {delimiter!r}")
    cut = idx + len(delimiter)
    return [RenderedSpan(line[:cut], head), RenderedSpan(line[cut:], tail)]


def _render_banner(line: str) -> list[RenderedSpan]:
    return [RenderedSpan(line, SpanRole.BANNER_TEXT)]


def _render_command(line: str) -> list[RenderedSpan]:
    return _split_after(line, COMMAND_MARKER, SpanRole.TIMESTAMP, SpanRole.COMMAND)


def _render_event(line: str) -> list[RenderedSpan]:
    return _split_after(line, TIMESTAMP_CLOSE, SpanRole.TIMESTAMP, SpanRole.CONTENT)


def _render_blank(line: str) -> list[RenderedSpan]:
    return [RenderedSpan(line, SpanRole.FILLER)]


def _render_plain(line: str) -> list[RenderedSpan]:
    return [RenderedSpan(line, SpanRole.CONTENT)]


RENDERERS: dict[LineKind, Callable[[str], list[RenderedSpan]]] = {
    LineKind.BANNER: _render_banner,
    LineKind.OUTGOING_COMMAND: _render_command,
    LineKind.TIMESTAMPED_EVENT: _render_event,
    LineKind.BLANK: _render_blank,
    LineKind.PLAIN: _render_plain,
}


def render(line: str, kind: LineKind) -> list[RenderedSpan]:
    """Split *line* into role-tagged spans according to *kind*.

    A command or event line missing its delimiter degrades to a single
    content span.
    """
    try:
        return RENDERERS[kind](line)
    except MalformedDelimiterError as exc:
        logger.debug("line_render_degraded", kind=kind.value, error=str(exc))
        return [RenderedSpan(line, SpanRole.CONTENT)]
