"""
Case-insensitive substring search over a rendered document.

Every query runs as a fresh linear scan; the previous result set is simply
discarded. Matches never overlap: scanning resumes at the end of the
previous hit, so ``"aa"`` occurs once in ``"aaa"``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class MatchRange:
    """A match inside the document.

    Attributes:
        start: Offset of the first matched character.
        length: Number of matched characters.
    """

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


def fold_case(text: str) -> str:
    """Lowercase *text* without changing its length.

    Characters whose lowercase form has a different length (e.g. ``İ``)
    are kept as-is so offsets in the folded text match the original.
    Final sigma folds to ``σ`` so context-dependent lowering cannot make a
    query and the document disagree.
    """
    lowered = text.lower()
    if len(lowered) != len(text):
        lowered = "".join(c if len(low := c.lower()) != 1 else low for c in text)
    return lowered.replace("ς", "σ")


def search(text: str, query: str) -> list[MatchRange]:
    """Return all non-overlapping, case-insensitive matches of *query*.

    Args:
        text: The document text.
        query: The search term; empty yields no matches.

    Returns:
        Matches ordered by start offset.
    """
    if not query:
        return []
    haystack = fold_case(text)
    needle = fold_case(query)
    size = len(needle)

    matches: list[MatchRange] = []
    pos = haystack.find(needle)
    while pos >= 0:
        matches.append(MatchRange(start=pos, length=size))
        pos = haystack.find(needle, pos + size)
    return matches


class SearchSession:
    """Search state for one document.

    Holds the current query and its matches, with a focused match for
    scrolling. Each :meth:`update` recomputes everything from scratch.

    Args:
        text: The document text to search.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._query = ""
        self._matches: list[MatchRange] = []
        self._focus: int | None = None

    # ── public API ──

    def update(self, query: str) -> list[MatchRange]:
        """Replace the query and return the new matches.

        An empty query clears all match state.
        """
        self._query = query
        self._matches = search(self._text, query)
        self._focus = 0 if self._matches else None
        logger.debug("search_completed", query=query, matches=len(self._matches))
        return list(self._matches)

    def clear(self) -> None:
        """Drop the query and all matches."""
        self._query = ""
        self._matches = []
        self._focus = None

    def next_match(self) -> MatchRange | None:
        """Move focus to the following match, wrapping at the end."""
        if self._focus is None:
            return None
        self._focus = (self._focus + 1) % len(self._matches)
        return self._matches[self._focus]

    def previous_match(self) -> MatchRange | None:
        """Move focus to the preceding match, wrapping at the start."""
        if self._focus is None:
            return None
        self._focus = (self._focus - 1) % len(self._matches)
        return self._matches[self._focus]

    @property
    def query(self) -> str:
        return self._query

    @property
    def matches(self) -> Sequence[MatchRange]:
        return tuple(self._matches)

    @property
    def focused(self) -> MatchRange | None:
        """The match to scroll to; the first one after each update."""
        if self._focus is None:
            return None
        return self._matches[self._focus]
