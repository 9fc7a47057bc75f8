from __future__ import annotations

from typing import List, Tuple

from markdown_toolbar.adapters.textual import TextualToolbarAdapter, TextualToolbarHooks
from markdown_toolbar.buffer import Location
from markdown_toolbar.toolbar import ToolbarRegistry, load_default_toolbar


class FakeTextArea:
    """Stands in for a Textual TextArea: text plus a (row, col) selection."""

    def __init__(
        self, text: str = "", start: Location = (0, 0), end: Location | None = None
    ) -> None:
        self.text = text
        self.selection: Tuple[Location, Location] = (start, end or start)
        self.writes = 0

    def write(self, text: str, start: Location, end: Location) -> None:
        self.text = text
        self.selection = (start, end)
        self.writes += 1


def make_adapter(
    area: FakeTextArea,
    *,
    statuses: List[str] | None = None,
    logs: List[str] | None = None,
) -> TextualToolbarAdapter:
    registry = ToolbarRegistry()
    load_default_toolbar(registry)
    hooks = TextualToolbarHooks(
        read_text=lambda: area.text,
        read_selection=lambda: area.selection,
        write=area.write,
        update_status=(statuses.append if statuses is not None else lambda _: None),
        log=(logs.append if logs is not None else lambda _: None),
    )
    return TextualToolbarAdapter(registry, hooks)


def test_adapter_lists_buttons_in_toolbar_order() -> None:
    adapter = make_adapter(FakeTextArea())

    assert [button.label for button in adapter.buttons()] == [
        "Bold",
        "Italic",
        "Heading",
        "Bullet List",
        "Link",
        "Code",
        "Quote",
    ]


def test_adapter_converts_multiline_selection() -> None:
    area = FakeTextArea("Line 1\nLine 2", (0, 0), (1, 6))
    adapter = make_adapter(area)

    adapter.press("Bullet List")

    assert area.text == "* Line 1\n* Line 2"
    assert area.selection == ((0, 2), (1, 8))


def test_adapter_handles_backwards_selection() -> None:
    area = FakeTextArea("say hi now", (0, 6), (0, 4))
    adapter = make_adapter(area)

    adapter.press("Bold")

    assert area.text == "say **hi** now"
    assert area.selection == ((0, 8), (0, 8))


def test_adapter_writes_caret_location_after_link() -> None:
    area = FakeTextArea("intro\nHello", (1, 0), (1, 5))
    adapter = make_adapter(area)

    adapter.press("Link")

    assert area.text == "intro\n[Hello](http://)"
    assert area.selection == ((1, 8), (1, 8))


def test_adapter_handle_key_runs_bound_button() -> None:
    area = FakeTextArea("Hello", (0, 0), (0, 5))
    adapter = make_adapter(area)

    assert adapter.handle_key("alt+q") is not None
    assert area.text == "> Hello"

    assert adapter.handle_key("x") is None
    assert adapter.handle_key("") is None
    assert area.writes == 1


def test_adapter_surfaces_status_and_log_lines() -> None:
    statuses: List[str] = []
    logs: List[str] = []
    area = FakeTextArea()
    adapter = make_adapter(area, statuses=statuses, logs=logs)

    adapter.press("Code")

    assert area.text == "``"
    assert statuses == ["Code"]
    assert any(line.startswith("press ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_adapter_rows_match_textual_line_separators() -> None:
    area = FakeTextArea("intro\u2028Hello", (1, 0), (1, 5))
    adapter = make_adapter(area)

    adapter.press("Link")

    assert area.text == "intro\u2028[Hello](http://)"
    assert area.selection == ((1, 8), (1, 8))
