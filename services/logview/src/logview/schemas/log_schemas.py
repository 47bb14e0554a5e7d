"""
Log viewer API schemas.

Pydantic response models for log listings, rendered documents with their
search matches, and cross-log search hits.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class LogFileResponse(BaseModel):
    name: str
    size_bytes: int
    created: datetime


class LogListResponse(BaseModel):
    logs: list[LogFileResponse]
    total: int


class SpanResponse(BaseModel):
    text: str
    role: str


class LineResponse(BaseModel):
    number: int
    kind: str
    spans: list[SpanResponse]


class MatchResponse(BaseModel):
    start: int
    length: int
    line: int


class DocumentResponse(BaseModel):
    name: str
    byte_size: int
    mode: str
    options: list[str] = Field(default_factory=list)
    window: str | None = None
    line_count: int = 0
    lines: list[LineResponse] = Field(default_factory=list)
    query: str = ""
    matches: list[MatchResponse] = Field(default_factory=list)
    focus: MatchResponse | None = None
    scroll_offset: int | None = None
    scroll_line: int | None = None
    locator_terms: list[MatchResponse] = Field(default_factory=list)


class SearchHitResponse(BaseModel):
    line_number: int
    line: str
    context: list[str]
    timestamp: str | None = None


class FileSearchResponse(BaseModel):
    name: str
    hits: list[SearchHitResponse]


class LogSearchResponse(BaseModel):
    query: str
    results: list[FileSearchResponse]
    total: int
