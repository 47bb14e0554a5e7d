"""
Document assembly: repaired, classified and rendered transcript text.

A :class:`Document` is derived from transcript text in one pass and never
modified afterwards; a new load or window choice builds a new one.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import structlog

from mt_common.metrics import document_build_seconds

from logview.line_classifier import ClassifiedLine, classify_lines
from logview.line_index import LineIndex
from logview.line_renderer import RenderedSpan, render
from logview.timestamp_normalizer import normalize

logger = structlog.get_logger()


@dataclass(frozen=True)
class RenderedLine:
    """A classified line with its spans."""

    line: ClassifiedLine
    spans: tuple[RenderedSpan, ...]


@dataclass(frozen=True)
class Document:
    """The text actually shown and searched.

    Attributes:
        text: Repaired lines joined with ``\\n``.
        lines: Every line, classified and rendered, in order.
        index: Line/offset index over :attr:`text`.
    """

    text: str
    lines: tuple[RenderedLine, ...]
    index: LineIndex

    @property
    def line_count(self) -> int:
        return len(self.lines)


def build_document(text: str) -> Document:
    """Repair timestamps in *text*, then classify and render each line."""
    started = time.perf_counter()
    repaired = normalize(text)
    raw_lines = repaired.split("\n")
    rendered = tuple(
        RenderedLine(line=cl, spans=tuple(render(cl.text, cl.kind)))
        for cl in classify_lines(raw_lines)
    )
    doc = Document(text=repaired, lines=rendered, index=LineIndex.build(repaired))
    elapsed = time.perf_counter() - started
    document_build_seconds.observe(elapsed)
    logger.info(
        "document_built",
        lines=doc.line_count,
        chars=len(repaired),
        duration_ms=round(elapsed * 1000, 2),
    )
    return doc
