"""
mt-common: Shared library for the MUDTapper log viewer.

Provides configuration management, structured logging, Prometheus metrics
helpers and the plain data records shared by the log viewer service.
"""

from mt_common.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
