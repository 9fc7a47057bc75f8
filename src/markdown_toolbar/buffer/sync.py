"""Adapter boundary types for exchanging text state with host widgets."""

from __future__ import annotations

from typing import Protocol

from .snapshot import FormatResult, TextSnapshot
from .state import SelectionRange


class EditorSync(Protocol):
    """How a host text field hands snapshots out and takes results back."""

    def pull_snapshot(self) -> TextSnapshot:
        """Return the text and selection as they are right now."""
        ...

    def commit(self, result: FormatResult) -> None:
        """Replace the host's text and selection with ``result`` in one step."""
        ...


class SelectionValidationError(RuntimeError):
    """Raised when a host reports a selection outside its text."""

    def __init__(
        self, message: str, *, selection: SelectionRange | None = None
    ) -> None:
        super().__init__(message)
        self.selection = selection


__all__ = ["EditorSync", "SelectionValidationError"]
