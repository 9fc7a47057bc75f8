"""Selection state for text buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Zero-based ``[start, end)`` character offsets; ``start == end`` is a caret."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("selection start cannot be negative")
        if self.end < self.start:
            raise ValueError("selection end cannot precede start")

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def shifted(self, delta: int) -> "SelectionRange":
        return SelectionRange(self.start + delta, self.end + delta)


__all__ = ["SelectionRange"]
