"""
Log file listing model for the MUDTapper log viewer.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field


class LogFileInfo(BaseModel):
    """Size and creation date of one session transcript.

    Attributes:
        name: File name (no directory).
        path: Absolute path of the file.
        size_bytes: File size in bytes.
        created: Creation (or, where unavailable, modification) time.
    """

    model_config = {"from_attributes": True}

    name: str = Field(..., description="File name.")
    path: Path = Field(..., description="Absolute file path.")
    size_bytes: int = Field(..., ge=0, description="File size in bytes.")
    created: datetime = Field(..., description="File creation time.")
