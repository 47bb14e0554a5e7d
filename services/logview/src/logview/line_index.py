"""
Bidirectional line-number / character-offset index over a document.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from logview.errors import OutOfRangeError


class LineIndex:
    """Maps 1-based line numbers to start offsets and back.

    Built once per document and never mutated. ``offset_of_line(1)`` is
    always 0 and each following line starts one past the end of the
    previous one (the ``\\n`` separator).
    """

    def __init__(self, starts: Sequence[int], text_length: int) -> None:
        self._starts = tuple(starts)
        self._text_length = text_length

    @classmethod
    def build(cls, text: str) -> LineIndex:
        """Index every ``\\n``-separated line of *text*."""
        starts = [0]
        pos = text.find("\n")
        while pos >= 0:
            starts.append(pos + 1)
            pos = text.find("\n", pos + 1)
        return cls(starts, len(text))

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def offset_of_line(self, number: int) -> int:
        """Return the start offset of line *number*.

        Raises:
            OutOfRangeError: If *number* is below 1 or past the last line.
        """
        if number < 1 or number > len(self._starts):
            raise OutOfRangeError(f"line {number} outside 1..{len(self._starts)}")
        return self._starts[number - 1]

    def line_range(self, number: int) -> tuple[int, int]:
        """Return ``(start, end)`` of line *number*, excluding its newline.

        Raises:
            OutOfRangeError: If *number* is out of range.
        """
        start = self.offset_of_line(number)
        if number < len(self._starts):
            end = self._starts[number] - 1
        else:
            end = self._text_length
        return start, end

    def line_at_offset(self, offset: int) -> int:
        """Return the line number containing *offset*.

        The end-of-text offset belongs to the last line.

        Raises:
            OutOfRangeError: If *offset* is negative or past the end of text.
        """
        if offset < 0 or offset > self._text_length:
            raise OutOfRangeError(f"offset {offset} outside 0..{self._text_length}")
        return bisect_right(self._starts, offset)
