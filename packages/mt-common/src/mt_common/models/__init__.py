"""
Shared Pydantic data models for the MUDTapper log viewer.

Plain value records consumed by the log viewer: the world (host) record
used for session logging, the search-result locator and log file listings.
"""

from mt_common.models.log_file import LogFileInfo
from mt_common.models.search import SearchResult
from mt_common.models.world import LoggableWorld

__all__ = [
    "LogFileInfo",
    "LoggableWorld",
    "SearchResult",
]
