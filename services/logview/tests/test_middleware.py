"""
Tests for the request logging middleware.

Checks that request context bound through structlog contextvars shows up
on the request line and on events logged while the request is served.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mt_common.config import Settings
from mt_common.logging import configure_logging

from logview.dependencies import get_app_settings
from logview.middleware import LoggingMiddleware, log_name_from_path
from logview.routers import logs


@pytest.fixture()
def json_logging() -> Iterator[None]:
    configure_logging(level="DEBUG", json=True)
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    app = FastAPI()
    app.dependency_overrides[get_app_settings] = lambda: settings
    app.include_router(logs.router, prefix="/api/v1")
    app.add_middleware(LoggingMiddleware)
    return TestClient(app)


def _records(out: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in out.splitlines() if line.startswith("{")]


class TestLogNameFromPath:

    def test_view_route(self) -> None:
        assert log_name_from_path("/api/v1/logs/Aard_2024.log") == "Aard_2024.log"

    def test_raw_route(self) -> None:
        assert log_name_from_path("/api/v1/logs/a.log/raw") == "a.log"

    def test_search_and_listing_have_no_name(self) -> None:
        assert log_name_from_path("/api/v1/logs/search") is None
        assert log_name_from_path("/api/v1/logs") is None
        assert log_name_from_path("/health") is None


class TestLoggingMiddleware:

    def test_request_line_carries_bound_context(
        self,
        json_logging: None,
        client: TestClient,
        write_log: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_log("a.log", "[2024-01-01 00:00:00] hello\n")
        assert client.get("/api/v1/logs/a.log").status_code == 200
        records = _records(capsys.readouterr().out)
        (request,) = [r for r in records if r["event"] == "http_request"]
        assert request["log"] == "a.log"
        assert request["method"] == "GET"
        assert request["path"] == "/api/v1/logs/a.log"
        assert request["status"] == 200

    def test_handler_events_carry_request_context(
        self,
        json_logging: None,
        client: TestClient,
        write_log: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_log("a.log", "[2024-01-01 00:00:00] hello\n")
        client.get("/api/v1/logs/a.log")
        records = _records(capsys.readouterr().out)
        (opened,) = [r for r in records if r["event"] == "log_opened"]
        assert opened["method"] == "GET"
        assert opened["path"] == "/api/v1/logs/a.log"
