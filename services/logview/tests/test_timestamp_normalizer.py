"""
Tests for timestamp repair.

Validates break insertion before concatenated timestamp markers,
idempotence, and the best-effort fallback when the pattern fails.
"""

from __future__ import annotations

from logview import timestamp_normalizer
from logview.timestamp_normalizer import extract_timestamp, insertion_points, normalize


class TestNormalize:

    def test_splits_concatenated_entries(self) -> None:
        text = "[2024-01-01 00:00:00] hi[2024-01-01 00:00:01] there"
        assert normalize(text) == "[2024-01-01 00:00:00] hi\n[2024-01-01 00:00:01] there"

    def test_marker_at_start_untouched(self) -> None:
        assert normalize("[2024-01-01 00:00:00] hi") == "[2024-01-01 00:00:00] hi"

    def test_marker_after_newline_untouched(self) -> None:
        text = "a\n[2024-01-01 00:00:00] hi"
        assert normalize(text) == text

    def test_many_markers_on_one_line(self) -> None:
        text = "x[2024-01-01 00:00:00]a[2024-01-01 00:00:01]b[2024-01-01 00:00:02]c"
        assert normalize(text).split("\n") == [
            "x",
            "[2024-01-01 00:00:00]a",
            "[2024-01-01 00:00:01]b",
            "[2024-01-01 00:00:02]c",
        ]

    def test_adjacent_markers(self) -> None:
        text = "[2024-01-01 00:00:00][2024-01-01 00:00:01]"
        assert normalize(text) == "[2024-01-01 00:00:00]\n[2024-01-01 00:00:01]"

    def test_non_timestamp_brackets_ignored(self) -> None:
        text = "you say [hello] to [2024-01-01]"
        assert normalize(text) == text

    def test_empty_text(self) -> None:
        assert normalize("") == ""

    def test_idempotent(self) -> None:
        text = "pre[2024-01-01 00:00:00] a[2024-01-01 00:00:01] b\n[2024-01-01 00:00:02] c"
        once = normalize(text)
        assert normalize(once) == once

    def test_only_inserts_newlines(self) -> None:
        text = "a[2024-01-01 00:00:00]b[2024-01-01 00:00:01]c"
        assert normalize(text).replace("\n", "") == text


class TestInsertionPoints:

    def test_points_against_original_text(self) -> None:
        text = "ab[2024-01-01 00:00:00]cd[2024-01-01 00:00:01]"
        assert insertion_points(text) == [2, 25]


class TestPatternFailure:

    def test_invalid_pattern_returns_input(self) -> None:
        text = "a[2024-01-01 00:00:00]b"
        assert normalize(text, pattern="[unclosed") == text

    def test_invalid_pattern_extract_returns_none(self) -> None:
        assert extract_timestamp("[2024-01-01 00:00:00] x", pattern="(") is None

    def test_default_pattern_compiles(self) -> None:
        assert timestamp_normalizer._compile(timestamp_normalizer.TIMESTAMP_PATTERN).pattern


class TestExtractTimestamp:

    def test_extracts_inner_text(self) -> None:
        assert extract_timestamp("[2024-03-04 05:06:07] > look") == "2024-03-04 05:06:07"

    def test_first_marker_wins(self) -> None:
        line = "x [2024-01-01 00:00:00] y [2024-01-02 00:00:00]"
        assert extract_timestamp(line) == "2024-01-01 00:00:00"

    def test_no_marker(self) -> None:
        assert extract_timestamp("plain text") is None
