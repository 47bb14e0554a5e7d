"""
World record for the MUDTapper log viewer.

A world is a remote game server the user connects to. The persisted
object graph lives elsewhere; the log viewer only sees this plain record.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoggableWorld(BaseModel):
    """A remote host as seen by the session logger.

    Attributes:
        name: User-facing world name.
        hostname: Server host name or address.
        port: Server TCP port.
    """

    model_config = {"from_attributes": True, "frozen": True}

    name: str | None = Field(default=None, max_length=255, description="World name.")
    hostname: str | None = Field(default=None, max_length=255, description="Server host.")
    port: int = Field(default=23, ge=0, le=65535, description="Server TCP port.")

    @property
    def display_name(self) -> str:
        """World name, or ``Unknown`` when unnamed."""
        return self.name or "Unknown"

    @property
    def display_host(self) -> str:
        """``host:port`` label, ``Unknown`` standing in for a missing host."""
        return f"{self.hostname or 'Unknown'}:{self.port}"
