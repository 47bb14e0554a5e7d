"""
Tests for in-document search.

Validates case-insensitive, non-overlapping matching, ordering, and the
recompute-from-scratch search session.
"""

from __future__ import annotations

from logview.search_engine import MatchRange, SearchSession, fold_case, search


class TestSearch:

    def test_repeated_characters_do_not_overlap(self) -> None:
        assert search("aaa", "aa") == [MatchRange(start=0, length=2)]

    def test_four_as_two_matches(self) -> None:
        assert search("aaaa", "aa") == [MatchRange(0, 2), MatchRange(2, 2)]

    def test_case_insensitive(self) -> None:
        text = "Hello there, HELLO again, hello"
        assert search(text, "Hello") == search(text, "hello") == search(text, "HELLO")
        assert len(search(text, "hello")) == 3

    def test_empty_query(self) -> None:
        assert search("anything", "") == []

    def test_no_match(self) -> None:
        assert search("abc", "xyz") == []

    def test_matches_ordered_and_disjoint(self) -> None:
        matches = search("ab ab abab ba", "ab")
        starts = [m.start for m in matches]
        assert starts == sorted(starts)
        for a, b in zip(matches, matches[1:]):
            assert a.end <= b.start

    def test_match_end(self) -> None:
        assert MatchRange(start=3, length=4).end == 7

    def test_offsets_survive_length_changing_lowercase(self) -> None:
        text = "İstanbul door"
        (match,) = search(text, "DOOR")
        assert text[match.start:match.end] == "door"

    def test_final_sigma(self) -> None:
        assert len(search("ΟΔΟΣ", "οδοσ")) == 1


class TestFoldCase:

    def test_keeps_length(self) -> None:
        text = "İİ abc"
        assert len(fold_case(text)) == len(text)

    def test_lowercases(self) -> None:
        assert fold_case("AbC") == "abc"


class TestSearchSession:

    def test_first_match_focused(self) -> None:
        session = SearchSession("one two one")
        matches = session.update("one")
        assert len(matches) == 2
        assert session.focused == matches[0]

    def test_update_replaces_previous(self) -> None:
        session = SearchSession("one two one")
        session.update("one")
        session.update("two")
        assert session.query == "two"
        assert list(session.matches) == [MatchRange(4, 3)]

    def test_empty_query_clears(self) -> None:
        session = SearchSession("one two")
        session.update("one")
        assert session.update("") == []
        assert session.matches == ()
        assert session.focused is None

    def test_clear(self) -> None:
        session = SearchSession("one")
        session.update("one")
        session.clear()
        assert session.query == ""
        assert session.focused is None

    def test_next_and_previous_wrap(self) -> None:
        session = SearchSession("a b a b a")
        first, second, third = session.update("a")
        assert session.next_match() == second
        assert session.next_match() == third
        assert session.next_match() == first
        assert session.previous_match() == third

    def test_navigation_without_matches(self) -> None:
        session = SearchSession("abc")
        session.update("zzz")
        assert session.next_match() is None
        assert session.previous_match() is None
