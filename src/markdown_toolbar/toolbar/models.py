"""Dataclasses describing toolbar controls."""

from __future__ import annotations

from dataclasses import dataclass

from markdown_toolbar.formatting.kinds import FormatKind


def normalize_shortcut(shortcut: str) -> str:
    """Lower-case a chord and sort its modifiers: ``"B+Alt"`` -> ``"alt+b"``."""

    parts = [part.strip().lower() for part in shortcut.split("+") if part.strip()]
    if not parts:
        raise ValueError("shortcut cannot be empty")
    *modifiers, key = parts
    ordered = sorted(dict.fromkeys(modifiers))
    return "+".join([*ordered, key])


@dataclass(frozen=True, slots=True)
class ToolbarButton:
    """One actionable toolbar control bound to a ``FormatKind``.

    ``label`` doubles as the accessible content description and defaults to
    the kind's own label.
    """

    id: str
    kind: FormatKind
    label: str = ""
    shortcut: str | None = None
    description: str = ""
    order: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("button id cannot be empty")
        if not isinstance(self.kind, FormatKind):
            raise TypeError("kind must be a FormatKind")
        label = self.label.strip() or self.kind.label
        object.__setattr__(self, "label", label)
        if self.shortcut is not None:
            object.__setattr__(self, "shortcut", normalize_shortcut(self.shortcut))

    @property
    def label_key(self) -> str:
        return self.label.casefold()


__all__ = ["ToolbarButton", "normalize_shortcut"]
