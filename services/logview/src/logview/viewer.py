"""
Viewer session for one session log.

Ties the pipeline together for a single opened file: size check, optional
window choice, document build, in-document search and locator handling.
Each viewer owns its transcript, document and index; nothing is shared
between viewers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from mt_common.config import Settings, get_settings
from mt_common.metrics import documents_loaded_total, load_errors_total, searches_total
from mt_common.models import SearchResult

from logview.document import Document, build_document
from logview.errors import OutOfRangeError, SourceUnreadableError
from logview.load_policy import LoadDecision, LoadMode, LoadPolicy, WindowOption
from logview.search_engine import MatchRange, SearchSession, search as find_all
from logview.transcript import Transcript

logger = structlog.get_logger()


@dataclass(frozen=True)
class SearchOutcome:
    """Result of :meth:`LogViewer.search`.

    Attributes:
        query: The query that produced the matches.
        matches: All matches, ordered by start offset.
        focus: The match to scroll to, if any.
        focus_line: Line number of *focus*, if any.
    """

    query: str
    matches: tuple[MatchRange, ...]
    focus: MatchRange | None
    focus_line: int | None


class LogViewer:
    """Loads and searches one session log.

    Args:
        path: The log file to view.
        locator: Optional search hit to scroll to and highlight on open.
        settings: Configuration; defaults to the process settings.
    """

    def __init__(
        self,
        path: str | Path,
        locator: SearchResult | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._path = Path(path)
        self._locator = locator
        self._policy = LoadPolicy(
            threshold_bytes=settings.large_file_threshold_bytes,
            window_lines=settings.window_lines,
        )
        self._transcript: Transcript | None = None
        self._decision: LoadDecision | None = None
        self._document: Document | None = None
        self._search: SearchSession | None = None
        self._searching = False
        self._log = logger.bind(log=self._path.name)

    # ── loading ──

    def open(self) -> LoadDecision:
        """Check the transcript size and load it if no choice is needed.

        Raises:
            SourceUnreadableError: If the file cannot be opened or decoded.
        """
        try:
            self._transcript = Transcript.open(self._path)
        except SourceUnreadableError:
            load_errors_total.inc()
            raise
        self._decision = self._policy.decide(self._transcript.byte_size)
        self._log.info(
            "log_opened",
            byte_size=self._decision.byte_size,
            mode=self._decision.mode.value,
        )
        if self._decision.mode is LoadMode.FULL_LOAD:
            self._load(WindowOption.FULL)
        return self._decision

    def choose(self, option: WindowOption) -> Document:
        """Materialise *option* and replace the current document.

        Raises:
            RuntimeError: If :meth:`open` has not been called.
            SourceUnreadableError: If the file cannot be decoded.
        """
        if self._transcript is None:
            raise RuntimeError("LogViewer.open() must be called first.")
        return self._load(option)

    def _load(self, option: WindowOption) -> Document:
        try:
            text = self._transcript.text  # type: ignore[union-attr]
        except SourceUnreadableError:
            load_errors_total.inc()
            raise
        document = build_document(self._policy.apply(text, option))
        self._document = document
        self._search = SearchSession(document.text)
        self._searching = False
        documents_loaded_total.labels(mode=option.value).inc()
        return document

    @property
    def decision(self) -> LoadDecision | None:
        return self._decision

    @property
    def document(self) -> Document | None:
        return self._document

    # ── search ──

    def search(self, query: str) -> SearchOutcome:
        """Run *query* against the current document, replacing prior results.

        Without a document, or with an empty query, the outcome is empty. Any
        query run against a document, empty or not, also hides the locator
        highlight until :meth:`clear_search`.
        """
        if self._document is None or self._search is None:
            return SearchOutcome(query=query, matches=(), focus=None, focus_line=None)
        self._searching = True
        if not query:
            self._search.clear()
            return SearchOutcome(query="", matches=(), focus=None, focus_line=None)

        matches = tuple(self._search.update(query))
        focus = self._search.focused
        focus_line = self._document.index.line_at_offset(focus.start) if focus else None
        searches_total.labels(scope="document").inc()
        self._log.debug("document_searched", query=query, matches=len(matches))
        return SearchOutcome(query=query, matches=matches, focus=focus, focus_line=focus_line)

    def clear_search(self) -> None:
        """Drop search matches and bring back the locator highlight."""
        self._searching = False
        if self._search is not None:
            self._search.clear()

    @property
    def search_session(self) -> SearchSession | None:
        return self._search

    # ── locator ──

    def locator_range(self) -> tuple[int, int] | None:
        """Character range of the locator's line, or ``None``."""
        if self._document is None or self._locator is None:
            return None
        try:
            return self._document.index.line_range(self._locator.line_number)
        except OutOfRangeError:
            self._log.info("locator_out_of_range", line=self._locator.line_number)
            return None

    def scroll_target(self) -> int | None:
        """Offset to scroll to for the locator, or ``None`` for no scroll."""
        line_range = self.locator_range()
        return line_range[0] if line_range else None

    def locator_term_ranges(self) -> list[tuple[int, int]]:
        """Occurrences of the locator's display term inside its line."""
        line_range = self.locator_range()
        term = self._locator.display_term if self._locator else None
        if line_range is None or not term:
            return []
        start, end = line_range
        line = self._document.text[start:end]  # type: ignore[union-attr]
        return [(start + m.start, start + m.end) for m in find_all(line, term)]

    @property
    def highlights(self) -> list[tuple[int, int]]:
        """``(start, end)`` ranges to highlight.

        Before any search, and again after :meth:`clear_search`, this is the
        locator line followed by its display term occurrences. Once a query
        has been run, only the current matches are highlighted.
        """
        if self._searching:
            if self._search is None:
                return []
            return [(m.start, m.end) for m in self._search.matches]
        line_range = self.locator_range()
        if line_range is None:
            return []
        return [line_range, *self.locator_term_ranges()]

    # ── export ──

    def export_source(self) -> Path:
        """Return the original transcript path for verbatim sharing."""
        return self._path

