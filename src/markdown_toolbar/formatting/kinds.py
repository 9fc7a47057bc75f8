"""Format kinds offered by the toolbar and the markers each one inserts."""

from __future__ import annotations

from enum import Enum


class FormatStyle(str, Enum):
    WRAP = "wrap"
    LINE_PREFIX = "line_prefix"
    TEMPLATE = "template"


class FormatKind(Enum):
    """Closed set of toolbar transformations.

    Each member's value is ``(label, style, opening, closing)``. Wrap kinds
    use the same marker on both sides, line-prefix kinds only have an opening
    marker, and the link template splits around the selected text.
    """

    BOLD = ("Bold", FormatStyle.WRAP, "**", "**")
    ITALIC = ("Italic", FormatStyle.WRAP, "*", "*")
    HEADING = ("Heading", FormatStyle.LINE_PREFIX, "# ", "")
    BULLET_LIST = ("Bullet List", FormatStyle.LINE_PREFIX, "* ", "")
    LINK = ("Link", FormatStyle.TEMPLATE, "[", "](http://)")
    CODE = ("Code", FormatStyle.WRAP, "`", "`")
    QUOTE = ("Quote", FormatStyle.LINE_PREFIX, "> ", "")

    def __init__(
        self, label: str, style: FormatStyle, opening: str, closing: str
    ) -> None:
        self.label = label
        self.style = style
        self.opening = opening
        self.closing = closing

    @property
    def line_scoped(self) -> bool:
        return self.style is FormatStyle.LINE_PREFIX

    @classmethod
    def from_label(cls, value: str) -> "FormatKind":
        """Resolve ``"Bullet List"``, ``"bullet_list"`` or ``"BULLET_LIST"``."""

        needle = value.strip().replace("_", " ").casefold()
        for kind in cls:
            if kind.label.casefold() == needle:
                return kind
        raise KeyError(f"Unknown format kind '{value}'")


__all__ = ["FormatKind", "FormatStyle"]
