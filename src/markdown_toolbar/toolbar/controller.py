"""Dispatches toolbar presses through the format engine into a host field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from markdown_toolbar.buffer.snapshot import FormatResult, TextSnapshot
from markdown_toolbar.buffer.sync import EditorSync
from markdown_toolbar.buffer.validation import clamp_selection
from markdown_toolbar.formatting.engine import apply_format_to
from markdown_toolbar.runtime import telemetry

from .models import ToolbarButton
from .registry import ToolbarRegistry


class ToolbarBus:
    """Minimal event bus letting hosts observe toolbar activity."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(frozen=True, slots=True)
class ToolbarPress:
    """Payload of ``toolbar.applied``: what was pressed and what it produced."""

    button: ToolbarButton
    before: TextSnapshot
    result: FormatResult


class ToolbarController:
    """Applies a button's format kind to whatever the host field holds."""

    def __init__(
        self,
        registry: ToolbarRegistry,
        field: EditorSync,
        *,
        bus: ToolbarBus | None = None,
    ) -> None:
        self.registry = registry
        self.field = field
        self.bus = bus or ToolbarBus()

    def press(self, reference: str) -> FormatResult:
        """Activate the button with id or label ``reference``."""

        return self._activate(self.registry.find(reference))

    def press_shortcut(self, shortcut: str) -> FormatResult:
        return self._activate(self.registry.find_by_shortcut(shortcut))

    def _activate(self, button: ToolbarButton) -> FormatResult:
        raw = self.field.pull_snapshot()
        snapshot = TextSnapshot(
            raw.text,
            clamp_selection(raw.text, raw.selection.start, raw.selection.end),
        )
        with telemetry.toolbar_span(
            "apply", button_id=button.id, kind=button.kind.name
        ) as handle:
            result = apply_format_to(snapshot, button.kind)
            handle.add_metadata("selection", result.as_tuple()[1:])
            self.field.commit(result)

        telemetry.record_applied(button.id, result)
        self.bus.emit("toolbar.applied", ToolbarPress(button, snapshot, result))
        return result


__all__ = ["ToolbarBus", "ToolbarController", "ToolbarPress"]
