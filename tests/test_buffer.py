from __future__ import annotations

import pytest

from markdown_toolbar.buffer import (
    EditorField,
    LineSpan,
    SelectionRange,
    SelectionValidationError,
    clamp_selection,
    display_rows,
    ensure_selection,
    line_spans,
    location_to_offset,
    offset_to_location,
    touched_lines,
)


def test_selection_range_rejects_invalid_offsets() -> None:
    with pytest.raises(ValueError):
        SelectionRange(-1, 2)
    with pytest.raises(ValueError):
        SelectionRange(3, 2)


def test_selection_range_helpers() -> None:
    caret = SelectionRange.caret(4)
    assert caret.is_caret
    assert caret.length == 0
    assert SelectionRange(1, 5).length == 4
    assert SelectionRange(1, 5).shifted(2) == SelectionRange(3, 7)


def test_clamp_selection_orders_and_bounds_offsets() -> None:
    assert clamp_selection("Hello", 9, 2) == SelectionRange(2, 5)
    assert clamp_selection("Hello", -3, 1) == SelectionRange(0, 1)
    assert clamp_selection("", 4, 4) == SelectionRange.caret(0)


def test_ensure_selection_reports_overflow() -> None:
    selection = SelectionRange(0, 6)

    with pytest.raises(SelectionValidationError) as excinfo:
        ensure_selection("Hello", selection)

    assert excinfo.value.selection == selection
    assert ensure_selection("Hello!", selection) is selection


def test_line_spans_of_empty_text() -> None:
    assert line_spans("") == [LineSpan(0, 0, 0, 0)]


def test_line_spans_track_break_widths() -> None:
    spans = line_spans("a\r\nbc\rd\n")

    assert [(span.start, span.end) for span in spans] == [
        (0, 1),
        (3, 5),
        (6, 7),
        (8, 8),
    ]
    assert [span.line_break for span in spans] == [2, 1, 1, 0]


def test_touched_lines_for_caret_and_range() -> None:
    text = "one\ntwo\nthree"

    assert [span.index for span in touched_lines(text, SelectionRange.caret(3))] == [0]
    assert [span.index for span in touched_lines(text, SelectionRange.caret(4))] == [1]
    assert [span.index for span in touched_lines(text, SelectionRange(2, 9))] == [
        0,
        1,
        2,
    ]


def test_location_round_trip_through_offsets() -> None:
    text = "ab\r\ncd\nef"

    assert offset_to_location(text, 5) == (1, 1)
    assert location_to_offset(text, (1, 1)) == 5
    assert location_to_offset(text, (2, 2)) == 9


def test_location_to_offset_clamps_out_of_range_locations() -> None:
    text = "ab\ncd"

    assert location_to_offset(text, (0, 10)) == 2
    assert location_to_offset(text, (7, 0)) == 3


def test_editor_field_edits_atomically() -> None:
    field = EditorField()
    assert field.text == ""
    assert field.selection == SelectionRange.caret(0)

    field.edit("Hello", SelectionRange(0, 5))
    assert field.pull_snapshot().selected_text == "Hello"
    assert field.version == 1

    field.select(2)
    assert field.selection == SelectionRange.caret(2)

    with pytest.raises(SelectionValidationError):
        field.edit("Hi", SelectionRange(0, 5))
    assert field.text == "Hello"


def test_display_rows_follow_splitlines() -> None:
    text = "ab\x0ccd\u2028ef\n"

    rows = display_rows(text)

    assert [(row.start, row.end) for row in rows] == [(0, 2), (3, 5), (6, 8), (9, 9)]
    assert len(rows) == len(text.splitlines()) + 1


def test_locations_use_display_rows() -> None:
    text = "ab\x0ccd\nef"

    assert location_to_offset(text, (1, 1)) == 4
    assert offset_to_location(text, 4) == (1, 1)
    assert offset_to_location(text, 8) == (2, 1)
