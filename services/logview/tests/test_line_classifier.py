"""
Tests for line classification.

Validates rule precedence, totality over arbitrary input, and whole
document classification with line numbering.
"""

from __future__ import annotations

import pytest

from logview.line_classifier import LineKind, classify, classify_lines


class TestClassify:

    def test_banner(self) -> None:
        assert classify("=====================================") is LineKind.BANNER

    def test_short_equals_run_is_plain(self) -> None:
        assert classify("==== not a banner") is LineKind.PLAIN

    def test_outgoing_command(self) -> None:
        assert classify("[2024-01-01 00:00:00] > look") is LineKind.OUTGOING_COMMAND

    def test_timestamped_event(self) -> None:
        assert classify("[2024-01-01 00:00:00] You see a door.") is LineKind.TIMESTAMPED_EVENT

    def test_blank_empty(self) -> None:
        assert classify("") is LineKind.BLANK

    def test_blank_whitespace(self) -> None:
        assert classify("  \t ") is LineKind.BLANK

    def test_plain(self) -> None:
        assert classify("Exits: north south") is LineKind.PLAIN

    def test_open_bracket_without_close_is_plain(self) -> None:
        assert classify("[unterminated") is LineKind.PLAIN

    def test_lone_bracket_is_plain(self) -> None:
        assert classify("[") is LineKind.PLAIN

    def test_banner_beats_command(self) -> None:
        assert classify("===== [x] > y") is LineKind.BANNER

    def test_command_marker_anywhere(self) -> None:
        assert classify("text] > more") is LineKind.OUTGOING_COMMAND

    def test_leading_space_event_is_plain(self) -> None:
        assert classify(" [2024-01-01 00:00:00] x") is LineKind.PLAIN

    @pytest.mark.parametrize(
        "line",
        ["", " ", "]", "[]", "] >", "=", "=====", "\x00", "ünïcödé", "[a]b] >c"],
    )
    def test_total(self, line: str) -> None:
        assert classify(line, is_first=True, is_last=True) in set(LineKind)

    def test_position_flags_do_not_change_kind(self) -> None:
        line = "[2024-01-01 00:00:00] x"
        assert classify(line, True, False) is classify(line, False, True)


class TestClassifyLines:

    def test_numbers_and_positions(self) -> None:
        lines = list(classify_lines(["=====", "[t] hi", ""]))
        assert [cl.number for cl in lines] == [1, 2, 3]
        assert [cl.kind for cl in lines] == [LineKind.BANNER, LineKind.TIMESTAMPED_EVENT, LineKind.BLANK]
        assert lines[0].is_first and not lines[0].is_last
        assert lines[2].is_last and not lines[2].is_first

    def test_single_line_is_first_and_last(self) -> None:
        (only,) = classify_lines(["x"])
        assert only.is_first and only.is_last

    def test_empty_sequence(self) -> None:
        assert list(classify_lines([])) == []
