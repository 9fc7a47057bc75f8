"""Text, selection and snapshot types shared by the engine and its hosts."""

from .field import EditorField
from .lines import (
    LineSpan,
    Location,
    display_rows,
    line_spans,
    location_to_offset,
    offset_to_location,
    touched_lines,
)
from .snapshot import FormatResult, TextSnapshot
from .state import SelectionRange
from .sync import EditorSync, SelectionValidationError
from .validation import clamp_selection, ensure_selection

__all__ = [
    "EditorField",
    "EditorSync",
    "FormatResult",
    "LineSpan",
    "Location",
    "SelectionRange",
    "SelectionValidationError",
    "TextSnapshot",
    "clamp_selection",
    "display_rows",
    "ensure_selection",
    "line_spans",
    "location_to_offset",
    "offset_to_location",
    "touched_lines",
]
