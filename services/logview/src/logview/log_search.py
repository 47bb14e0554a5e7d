"""
Cross-log search over the session log directory.

Scans raw log files line by line for a plain or regex query and returns
:class:`SearchResult` locators the viewer can open at. Line numbers refer
to the raw file, before timestamp repair.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

import structlog

from mt_common.metrics import searches_total
from mt_common.models import LogFileInfo, SearchResult

from logview.load_policy import logical_lines
from logview.timestamp_normalizer import extract_timestamp

logger = structlog.get_logger()

LOG_SUFFIX = ".log"


def list_log_files(log_dir: str | Path) -> list[Path]:
    """Return ``*.log`` files in *log_dir*, newest first.

    Hidden files, and files that vanish while listing, are skipped. A
    missing directory yields an empty list.
    """
    log_dir = Path(log_dir)
    try:
        entries = list(log_dir.iterdir())
    except OSError as exc:
        logger.warning("log_dir_unreadable", log_dir=str(log_dir), error=str(exc))
        return []

    dated: list[tuple[float, Path]] = []
    for path in entries:
        if path.suffix != LOG_SUFFIX or path.name.startswith("."):
            continue
        try:
            if not path.is_file():
                continue
            dated.append((_created(path), path))
        except OSError as exc:
            logger.debug("log_file_vanished", path=str(path), error=str(exc))
    dated.sort(key=lambda item: item[0], reverse=True)
    return [path for _, path in dated]


def _created(path: Path) -> float:
    stat = path.stat()
    return getattr(stat, "st_birthtime", stat.st_mtime)


def log_file_info(path: str | Path) -> LogFileInfo | None:
    """Return size and creation date of *path*, or ``None`` if it cannot be read."""
    path = Path(path)
    try:
        size = path.stat().st_size
        created = datetime.fromtimestamp(_created(path))
    except OSError:
        return None
    return LogFileInfo(name=path.name, path=path.resolve(), size_bytes=size, created=created)


def search_log_file(
    path: str | Path,
    query: str,
    case_sensitive: bool = False,
    regex: bool = False,
    context_lines: int = 2,
) -> list[SearchResult]:
    """Search one raw log file line by line.

    Args:
        path: Log file to scan.
        query: Substring, or a regular expression when *regex* is set.
        case_sensitive: Match case exactly.
        regex: Treat *query* as a regular expression.
        context_lines: Lines kept before and after each hit.

    Returns:
        One :class:`SearchResult` per matching line. An unreadable file or
        an invalid regex yields an empty list.
    """
    if not query:
        return []
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("log_search_file_skipped", path=str(path), error=str(exc))
        return []

    if regex:
        try:
            pattern = re.compile(query, 0 if case_sensitive else re.IGNORECASE)
        except re.error as exc:
            logger.warning("log_search_invalid_regex", query=query, error=str(exc))
            return []

        def matches(line: str) -> bool:
            return pattern.search(line) is not None
    else:
        needle = query if case_sensitive else query.lower()

        def matches(line: str) -> bool:
            return needle in (line if case_sensitive else line.lower())

    lines = logical_lines(content)
    results: list[SearchResult] = []
    for index, line in enumerate(lines):
        if not matches(line):
            continue
        start = max(0, index - context_lines)
        end = min(len(lines), index + context_lines + 1)
        results.append(
            SearchResult(
                line_number=index + 1,
                line=line,
                context=lines[start:end],
                timestamp=extract_timestamp(line),
                display_term=query,
            )
        )
    return results


def search_logs(
    log_dir: str | Path,
    query: str,
    case_sensitive: bool = False,
    regex: bool = False,
    context_lines: int = 2,
) -> dict[Path, list[SearchResult]]:
    """Search every log in *log_dir*; only files with hits are returned."""
    results: dict[Path, list[SearchResult]] = {}
    files = list_log_files(log_dir)
    for log_file in files:
        hits = search_log_file(log_file, query, case_sensitive, regex, context_lines)
        if hits:
            results[log_file] = hits
    searches_total.labels(scope="logs").inc()
    logger.info(
        "log_search_completed",
        query=query,
        files=len(files),
        files_with_hits=len(results),
        hits=sum(len(v) for v in results.values()),
    )
    return results
