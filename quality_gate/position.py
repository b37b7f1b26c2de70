"""Map linear source offsets to 1-based line/column positions."""

from __future__ import annotations

import bisect
import re
from typing import List, Tuple

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class PositionMapper:
    """Resolve offsets within one source text.

    Line starts are computed once; every query is a binary search, so a rule
    may ask for many positions during a single traversal. ``\\r\\n``, ``\\r``
    and ``\\n`` each terminate a line. Offsets count characters, not bytes.
    """

    def __init__(self, source: str) -> None:
        self._length = len(source)
        self._line_starts: List[int] = [0]
        self._line_starts.extend(match.end() for match in _LINE_BREAK.finditer(source))

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def offset_to_line_column(self, offset: int) -> Tuple[int, int]:
        if offset < 0 or offset > self._length:
            raise ValueError(f"offset {offset} is outside the source (length {self._length})")
        index = bisect.bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index] + 1


def offset_to_line_column(source: str, offset: int) -> Tuple[int, int]:
    """One-off lookup; build a :class:`PositionMapper` for repeated queries."""

    return PositionMapper(source).offset_to_line_column(offset)
