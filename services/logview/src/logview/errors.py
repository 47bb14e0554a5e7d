"""
Error kinds for the log viewer core.

Only :class:`SourceUnreadableError` crosses into callers. The other kinds
are raised and recovered inside the module that owns them.
"""

from __future__ import annotations


class LogViewError(Exception):
    """Base class for log viewer errors."""


class SourceUnreadableError(LogViewError):
    """The transcript could not be opened or decoded as UTF-8."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Could not read log file {path}: {reason}")
        self.path = path
        self.reason = reason


class PatternEngineUnavailableError(LogViewError):
    """The timestamp-repair pattern could not be compiled."""


class OutOfRangeError(LogViewError, IndexError):
    """A line number or offset lies outside the current document."""


class MalformedDelimiterError(LogViewError):
    """A classified line lacks the delimiter its kind requires."""
