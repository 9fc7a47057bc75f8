"""Executable Textual app: a TextArea with a Markdown formatting toolbar."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Button, Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markdown_toolbar.adapters.textual.app"
    ) from exc

from markdown_toolbar.buffer.lines import Location
from markdown_toolbar.runtime import telemetry
from markdown_toolbar.toolbar import ToolbarRegistry, load_default_toolbar

from .controller import TextualToolbarAdapter, TextualToolbarHooks


def create_default_registry() -> ToolbarRegistry:
    registry = ToolbarRegistry()
    load_default_toolbar(registry)
    return registry


def _widget_id(button_id: str) -> str:
    # Textual ids may not contain dots.
    return "tool-" + button_id.replace(".", "-")


@dataclass
class UIState:
    status_text: str = ""
    last_log: str = ""


class MarkdownEditorApp(App[None]):
    """Minimal Textual editor with one toolbar button per format kind."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: 3;
		background: $surface-darken-1;
	}

	#toolbar Button {
		min-width: 8;
		margin: 0 1 0 0;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        text: str = "",
        registry: ToolbarRegistry | None = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._initial_text = text
        self.registry = registry or create_default_registry()
        self.adapter: TextualToolbarAdapter | None = None
        self._text_area: TextArea | None = None
        self._status_widget: Static | None = None
        self._button_ids: Dict[str, str] = {}
        self._logger = telemetry.get_logger("markdown_toolbar.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="toolbar"):
            for button in self.registry.iter_buttons():
                widget_id = _widget_id(button.id)
                self._button_ids[widget_id] = button.id
                widget = Button(button.label, id=widget_id)
                widget.tooltip = button.description
                if button.shortcut:
                    widget.tooltip = f"{button.description} ({button.shortcut})"
                yield widget
        self._text_area = TextArea(self._initial_text, id="editor")
        yield self._text_area
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualToolbarHooks(
            read_text=self._read_text,
            read_selection=self._read_selection,
            write=self._write,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualToolbarAdapter(self.registry, hooks)
        if self._text_area:
            self._text_area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = self._button_ids.get(event.button.id or "")
        if not self.adapter or button_id is None:
            return
        self.adapter.press(button_id)
        event.stop()
        if self._text_area:
            self._text_area.focus()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self.adapter.handle_key(event.key) is not None:
            event.stop()
            event.prevent_default()

    def _read_text(self) -> str:
        return self._text_area.text if self._text_area else ""

    def _read_selection(self) -> Tuple[Location, Location]:
        if not self._text_area:
            return ((0, 0), (0, 0))
        selection = self._text_area.selection
        return (selection.start, selection.end)

    def _write(self, text: str, start: Location, end: Location) -> None:
        area = self._text_area
        if area is None:
            return
        area.replace(
            text, (0, 0), area.document.end, maintain_selection_offset=False
        )
        area.selection = Selection(start, end)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self._state.last_log = line
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the Markdown toolbar Textual editor."
    )
    parser.add_argument(
        "--text",
        default="",
        help="Initial editor content",
    )
    parser.add_argument(
        "--preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("MARKDOWN_TOOLBAR_PRESET"),
        help="Telemetry preset (default: configure from environment)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    app = MarkdownEditorApp(text=args.text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
