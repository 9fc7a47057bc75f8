"""Selection checks hosts run before handing a snapshot to the engine."""

from __future__ import annotations

from .state import SelectionRange
from .sync import SelectionValidationError


def clamp_selection(text: str, start: int, end: int) -> SelectionRange:
    """Order raw offsets and pin them into ``[0, len(text)]``."""

    if start > end:
        start, end = end, start
    limit = len(text)
    return SelectionRange(max(0, min(start, limit)), max(0, min(end, limit)))


def ensure_selection(text: str, selection: SelectionRange) -> SelectionRange:
    if selection.end > len(text):
        raise SelectionValidationError(
            "Selection extends past end of text", selection=selection
        )
    return selection


__all__ = ["clamp_selection", "ensure_selection"]
