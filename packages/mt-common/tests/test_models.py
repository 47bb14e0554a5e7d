"""
Tests for mt-common shared data models.

Validates defaults, validation constraints and derived properties of the
world, search-result and log file records.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from mt_common.models import LogFileInfo, LoggableWorld, SearchResult


class TestLoggableWorld:

    def test_display_name_defaults_to_unknown(self) -> None:
        assert LoggableWorld().display_name == "Unknown"

    def test_display_host(self) -> None:
        world = LoggableWorld(name="Aardwolf", hostname="aardmud.org", port=4000)
        assert world.display_host == "aardmud.org:4000"

    def test_display_host_without_hostname(self) -> None:
        assert LoggableWorld(port=23).display_host == "Unknown:23"

    def test_port_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggableWorld(port=65536)

    def test_frozen(self) -> None:
        world = LoggableWorld(name="a")
        with pytest.raises(ValidationError):
            world.name = "b"  # type: ignore[misc]


class TestSearchResult:

    def test_minimal_locator(self) -> None:
        result = SearchResult(line_number=3)
        assert result.line == ""
        assert result.context == []
        assert result.timestamp is None
        assert result.display_term is None

    def test_line_number_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SearchResult(line_number=0)

    def test_serialises(self) -> None:
        result = SearchResult(line_number=2, line="hello", display_term="he")
        data = result.model_dump()
        assert data["line_number"] == 2
        assert data["display_term"] == "he"


class TestLogFileInfo:

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogFileInfo(name="a.log", path=Path("/tmp/a.log"), size_bytes=-1, created=datetime.now())

    def test_fields(self) -> None:
        info = LogFileInfo(name="a.log", path=Path("/tmp/a.log"), size_bytes=10, created=datetime(2024, 1, 1))
        assert info.name == "a.log"
        assert info.size_bytes == 10
