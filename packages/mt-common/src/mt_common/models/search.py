"""
Search-result locator model for the MUDTapper log viewer.

A locator is produced by a search over raw log files and handed to the
viewer so it can scroll to and highlight the hit when a log is opened.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A single line hit inside a log file.

    Attributes:
        line_number: 1-based line number of the hit.
        line: The full text of the matching line.
        context: Lines surrounding the hit (the hit included).
        timestamp: Bracketed timestamp found on the line, if any.
        display_term: Query term to show highlighted in the viewer.
    """

    model_config = {"from_attributes": True, "frozen": True}

    line_number: int = Field(..., ge=1, description="1-based line number of the hit.")
    line: str = Field(default="", description="Text of the matching line.")
    context: list[str] = Field(default_factory=list, description="Surrounding lines.")
    timestamp: str | None = Field(default=None, description="Timestamp found on the line.")
    display_term: str | None = Field(default=None, description="Query term to highlight.")
