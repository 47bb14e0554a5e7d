"""
Session log API router.

Endpoints for listing logs, viewing one log as a rendered document with
in-document search, searching across all logs, and downloading the
original file unchanged.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from mt_common.config import Settings
from mt_common.models import SearchResult

from logview.dependencies import get_app_settings, get_log_dir, resolve_log_path
from logview.errors import SourceUnreadableError
from logview.load_policy import LoadMode, WindowOption
from logview.log_search import list_log_files, log_file_info, search_logs
from logview.schemas.log_schemas import (
    DocumentResponse,
    FileSearchResponse,
    LineResponse,
    LogFileResponse,
    LogListResponse,
    LogSearchResponse,
    MatchResponse,
    SearchHitResponse,
    SpanResponse,
)
from logview.search_engine import MatchRange
from logview.viewer import LogViewer

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("", response_model=LogListResponse)
def list_logs(log_dir: Path = Depends(get_log_dir)) -> LogListResponse:
    logs: list[LogFileResponse] = []
    for path in list_log_files(log_dir):
        info = log_file_info(path)
        if info is not None:
            logs.append(
                LogFileResponse(name=info.name, size_bytes=info.size_bytes, created=info.created),
            )
    return LogListResponse(logs=logs, total=len(logs))


@router.get("/search", response_model=LogSearchResponse)
def search_all_logs(
    q: str = Query(..., min_length=1),
    case_sensitive: bool = Query(default=False),
    regex: bool = Query(default=False),
    log_dir: Path = Depends(get_log_dir),
    settings: Settings = Depends(get_app_settings),
) -> LogSearchResponse:
    found = search_logs(
        log_dir,
        q,
        case_sensitive=case_sensitive,
        regex=regex,
        context_lines=settings.search_context_lines,
    )
    results = [
        FileSearchResponse(
            name=path.name,
            hits=[
                SearchHitResponse(
                    line_number=h.line_number,
                    line=h.line,
                    context=h.context,
                    timestamp=h.timestamp,
                )
                for h in hits
            ],
        )
        for path, hits in sorted(found.items(), key=lambda item: item[0].name)
    ]
    return LogSearchResponse(
        query=q,
        results=results,
        total=sum(len(r.hits) for r in results),
    )


@router.get("/{name}", response_model=DocumentResponse)
def view_log(
    name: str,
    window: WindowOption | None = Query(default=None),
    q: str = Query(default=""),
    line: int | None = Query(default=None),
    term: str | None = Query(default=None),
    path: Path = Depends(resolve_log_path),
    settings: Settings = Depends(get_app_settings),
) -> DocumentResponse:
    locator = SearchResult(line_number=line, display_term=term) if line and line > 0 else None
    viewer = LogViewer(path, locator=locator, settings=settings)
    applied = WindowOption.FULL
    try:
        decision = viewer.open()
        if decision.mode is LoadMode.WINDOW_CHOICE and window is not None:
            viewer.choose(window)
            applied = window
    except SourceUnreadableError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    response = DocumentResponse(
        name=path.name,
        byte_size=decision.byte_size,
        mode=decision.mode.value,
        options=[o.value for o in decision.options],
    )
    document = viewer.document
    if document is None:
        return response

    outcome = viewer.search(q)

    def to_match(m: MatchRange) -> MatchResponse:
        return MatchResponse(start=m.start, length=m.length, line=document.index.line_at_offset(m.start))

    response.window = applied.value
    response.line_count = document.line_count
    response.lines = [
        LineResponse(
            number=rl.line.number,
            kind=rl.line.kind.value,
            spans=[SpanResponse(text=s.display_text, role=s.role.value) for s in rl.spans],
        )
        for rl in document.lines
    ]
    response.query = outcome.query
    response.matches = [to_match(m) for m in outcome.matches]
    response.focus = to_match(outcome.focus) if outcome.focus else None
    response.scroll_offset = viewer.scroll_target()
    response.scroll_line = locator.line_number if response.scroll_offset is not None else None
    response.locator_terms = [
        MatchResponse(start=start, length=end - start, line=locator.line_number)
        for start, end in viewer.locator_term_ranges()
    ]
    return response


@router.get("/{name}/raw")
def download_log(name: str, path: Path = Depends(resolve_log_path)) -> FileResponse:
    return FileResponse(path, media_type="text/plain; charset=utf-8", filename=path.name)
