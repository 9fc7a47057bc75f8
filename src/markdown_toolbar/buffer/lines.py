"""Line boundary scanning over raw text.

``\\r\\n``, ``\\r`` and ``\\n`` each count as one line break. Breaks are only
located, never rewritten, so callers can splice around them without changing
the document's newline convention.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .state import SelectionRange

Location = Tuple[int, int]  # (row, column)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class LineSpan:
    """One line of text: ``[start, end)`` excludes the trailing break."""

    index: int
    start: int
    end: int
    break_end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def line_break(self) -> int:
        return self.break_end - self.end


def line_spans(text: str) -> List[LineSpan]:
    """Split ``text`` into spans; there is always at least one (possibly empty) line."""

    spans: List[LineSpan] = []
    start = 0
    for match in _LINE_BREAK.finditer(text):
        spans.append(LineSpan(len(spans), start, match.start(), match.end()))
        start = match.end()
    spans.append(LineSpan(len(spans), start, len(text), len(text)))
    return spans


def _line_at(starts: Sequence[int], offset: int) -> int:
    return max(0, bisect_right(starts, offset) - 1)


def touched_lines(text: str, selection: SelectionRange) -> List[LineSpan]:
    """Lines whose ``[start, end]`` range meets the closed selection interval.

    A caret touches exactly its own line. An offset sitting between the two
    characters of a ``\\r\\n`` pair belongs to the line that break ends.
    """

    spans = line_spans(text)
    starts = [span.start for span in spans]
    first = _line_at(starts, selection.start)
    last = _line_at(starts, selection.end)
    return spans[first : last + 1]


def display_rows(text: str) -> List[LineSpan]:
    """Rows as a Textual ``Document`` sees them.

    Textual splits with ``str.splitlines()``, which also breaks on form
    feeds, vertical tabs, ``\\x1c``-``\\x1e``, ``\\x85`` and the Unicode line and
    paragraph separators, so ``(row, column)`` locations are mapped with the
    same split rather than with ``line_spans``.
    """

    rows: List[LineSpan] = []
    start = 0
    for chunk in text.splitlines(keepends=True):
        body = chunk.splitlines()[0]
        end = start + len(body)
        rows.append(LineSpan(len(rows), start, end, start + len(chunk)))
        start += len(chunk)
    if not rows or rows[-1].break_end > rows[-1].end:
        rows.append(LineSpan(len(rows), start, start, start))
    return rows


def offset_to_location(text: str, offset: int) -> Location:
    spans = display_rows(text)
    row = _line_at([span.start for span in spans], offset)
    span = spans[row]
    return (row, min(offset, span.end) - span.start)


def location_to_offset(text: str, location: Location) -> int:
    spans = display_rows(text)
    row, col = location
    row = max(0, min(row, len(spans) - 1))
    span = spans[row]
    return span.start + max(0, min(col, span.length))


__all__ = [
    "Location",
    "LineSpan",
    "display_rows",
    "line_spans",
    "touched_lines",
    "offset_to_location",
    "location_to_offset",
]
