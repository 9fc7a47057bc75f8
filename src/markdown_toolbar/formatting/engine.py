"""Pure toolbar transformations over a ``(text, selection)`` snapshot.

Every function here takes an immutable snapshot and returns a fresh
``FormatResult``; nothing is mutated and nothing is remembered between
calls. Markers are always added, never detected or stripped, so applying a
kind to already formatted text nests the markup.
"""

from __future__ import annotations

from typing import Callable, Dict

from markdown_toolbar.buffer.lines import touched_lines
from markdown_toolbar.buffer.snapshot import FormatResult, TextSnapshot
from markdown_toolbar.buffer.state import SelectionRange

from .kinds import FormatKind, FormatStyle

Transform = Callable[[TextSnapshot, FormatKind], FormatResult]


def apply_format(
    text: str, selection_start: int, selection_end: int, kind: FormatKind
) -> FormatResult:
    """Apply ``kind`` to ``text`` with the given selection.

    Offsets must already satisfy ``0 <= start <= end <= len(text)``; hosts
    clamp them with ``clamp_selection`` before calling in.
    """

    snapshot = TextSnapshot(text, SelectionRange(selection_start, selection_end))
    return apply_format_to(snapshot, kind)


def apply_format_to(snapshot: TextSnapshot, kind: FormatKind) -> FormatResult:
    return _TRANSFORMS[kind.style](snapshot, kind)


def _wrap(snapshot: TextSnapshot, kind: FormatKind) -> FormatResult:
    text = snapshot.text
    start, end = snapshot.selection.start, snapshot.selection.end
    marker = kind.opening
    new_text = text[:start] + marker + text[start:end] + kind.closing + text[end:]
    # Caret lands at the end of the wrapped content, before the closing marker.
    return FormatResult(new_text, SelectionRange.caret(end + len(marker)), kind)


def _prefix_lines(snapshot: TextSnapshot, kind: FormatKind) -> FormatResult:
    text = snapshot.text
    selection = snapshot.selection
    prefix = kind.opening
    lines = touched_lines(text, selection)

    parts = []
    cursor = 0
    for line in lines:
        parts.append(text[cursor : line.start])
        parts.append(prefix)
        cursor = line.start
    parts.append(text[cursor:])

    # The first touched line always starts at or before the selection.
    start = selection.start + len(prefix)
    end = selection.end + len(prefix) * len(lines)
    return FormatResult("".join(parts), SelectionRange(start, end), kind)


def _link(snapshot: TextSnapshot, kind: FormatKind) -> FormatResult:
    text = snapshot.text
    start, end = snapshot.selection.start, snapshot.selection.end
    label = text[start:end]
    new_text = text[:start] + kind.opening + label + kind.closing + text[end:]
    if snapshot.selection.is_caret:
        caret = start + len(kind.opening)
    else:
        # Inside the parentheses, ready to replace the placeholder URL.
        caret = start + len(kind.opening) + len(label) + len("](")
    return FormatResult(new_text, SelectionRange.caret(caret), kind)


_TRANSFORMS: Dict[FormatStyle, Transform] = {
    FormatStyle.WRAP: _wrap,
    FormatStyle.LINE_PREFIX: _prefix_lines,
    FormatStyle.TEMPLATE: _link,
}


__all__ = ["apply_format", "apply_format_to"]
