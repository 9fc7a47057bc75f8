"""Textual adapter that runs toolbar presses against a TextArea-like host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from markdown_toolbar.buffer.lines import (
    Location,
    location_to_offset,
    offset_to_location,
)
from markdown_toolbar.buffer.snapshot import FormatResult, TextSnapshot
from markdown_toolbar.buffer.validation import clamp_selection
from markdown_toolbar.toolbar import (
    ToolbarButton,
    ToolbarController,
    ToolbarPress,
    ToolbarRegistry,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualToolbarHooks:
    """Callbacks the adapter uses to read from and write to the host widget.

    Locations are Textual-style ``(row, column)`` pairs. ``read_selection``
    returns ``(start, end)`` in whatever direction the user dragged.
    """

    read_text: Callable[[], str]
    read_selection: Callable[[], Tuple[Location, Location]]
    write: Callable[[str, Location, Location], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualToolbarAdapter:
    """Bridges ToolbarController to a Textual surface via ``(row, col)`` locations."""

    def __init__(self, registry: ToolbarRegistry, hooks: TextualToolbarHooks) -> None:
        self.registry = registry
        self.hooks = hooks
        self.controller = ToolbarController(registry, self)
        self.controller.bus.subscribe("toolbar.applied", self._handle_applied)

    def buttons(self) -> tuple[ToolbarButton, ...]:
        return tuple(self.registry.iter_buttons())

    def press(self, reference: str) -> FormatResult:
        self._log_state("press ->", button=reference)
        return self.controller.press(reference)

    def handle_key(self, key: str) -> Optional[FormatResult]:
        """Run the button bound to ``key``; ``None`` when nothing is bound."""

        try:
            button = self.registry.find_by_shortcut(key)
        except (KeyError, ValueError):
            return None
        self._log_state("key ->", key=key, button=button.id)
        return self.controller.press(button.id)

    def pull_snapshot(self) -> TextSnapshot:
        # Rows are counted with ``display_rows``, the widget's own line split.
        text = self.hooks.read_text()
        anchor, cursor = self.hooks.read_selection()
        return TextSnapshot(
            text,
            clamp_selection(
                text,
                location_to_offset(text, anchor),
                location_to_offset(text, cursor),
            ),
        )

    def commit(self, result: FormatResult) -> None:
        start = offset_to_location(result.text, result.selection_start)
        end = offset_to_location(result.text, result.selection_end)
        self.hooks.write(result.text, start, end)

    def _handle_applied(self, payload: object | None) -> None:
        if not isinstance(payload, ToolbarPress):
            return
        self.hooks.update_status(payload.button.label)
        self._log_state(
            "result <-",
            button=payload.button.id,
            selection=payload.result.as_tuple()[1:],
            length=len(payload.result.text),
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {"revision": self.registry.revision()}
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["TextualToolbarAdapter", "TextualToolbarHooks"]
