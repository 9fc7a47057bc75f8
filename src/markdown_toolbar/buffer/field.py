"""In-memory text field used as the default host for toolbar actions."""

from __future__ import annotations

from .snapshot import FormatResult, TextSnapshot
from .state import SelectionRange
from .validation import ensure_selection


class EditorField:
    """Mutable text + selection pair, edited atomically.

    Mirrors what a UI text field holds: the current document and where the
    cursor or selection sits. Toolbar actions never see this object directly;
    they receive a ``TextSnapshot`` and return a ``FormatResult`` that is
    committed back here.
    """

    def __init__(
        self, text: str = "", selection: SelectionRange | None = None
    ) -> None:
        self._text = text
        self._selection = ensure_selection(
            text, selection or SelectionRange.caret(len(text))
        )
        self.version = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> SelectionRange:
        return self._selection

    def edit(self, text: str, selection: SelectionRange | None = None) -> None:
        """Replace the whole field; the caret defaults to the end of ``text``."""

        selection = selection or SelectionRange.caret(len(text))
        ensure_selection(text, selection)
        self._text = text
        self._selection = selection
        self.version += 1

    def select(self, start: int, end: int | None = None) -> None:
        self.edit(self._text, SelectionRange(start, start if end is None else end))

    def pull_snapshot(self) -> TextSnapshot:
        return TextSnapshot(self._text, self._selection)

    def commit(self, result: FormatResult) -> None:
        self.edit(result.text, result.selection)


__all__ = ["EditorField"]
