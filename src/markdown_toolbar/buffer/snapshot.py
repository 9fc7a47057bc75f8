"""Immutable text + selection pairs exchanged with the format engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .state import SelectionRange

if TYPE_CHECKING:  # pragma: no cover
    from markdown_toolbar.formatting.kinds import FormatKind


@dataclass(frozen=True, slots=True)
class TextSnapshot:
    """Consistent view of a text field taken before a toolbar action."""

    text: str
    selection: SelectionRange

    @classmethod
    def of(cls, text: str, start: int, end: int | None = None) -> "TextSnapshot":
        return cls(text, SelectionRange(start, start if end is None else end))

    @property
    def selected_text(self) -> str:
        return self.text[self.selection.start : self.selection.end]


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Text and selection the host should commit after applying ``kind``."""

    text: str
    selection: SelectionRange
    kind: "FormatKind"

    @property
    def selection_start(self) -> int:
        return self.selection.start

    @property
    def selection_end(self) -> int:
        return self.selection.end

    def as_tuple(self) -> Tuple[str, int, int]:
        return (self.text, self.selection.start, self.selection.end)

    def snapshot(self) -> TextSnapshot:
        return TextSnapshot(self.text, self.selection)


__all__ = ["TextSnapshot", "FormatResult"]
