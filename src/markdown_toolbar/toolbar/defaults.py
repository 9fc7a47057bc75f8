"""Built-in toolbar: one button per format kind."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping

from markdown_toolbar.formatting.kinds import FormatKind

from .models import ToolbarButton
from .registry import ToolbarRegistry

DEFAULT_BUTTONS: tuple[ToolbarButton, ...] = (
    ToolbarButton(
        id="format.bold",
        kind=FormatKind.BOLD,
        shortcut="alt+b",
        description="Wrap the selection in bold markers",
        order=10,
    ),
    ToolbarButton(
        id="format.italic",
        kind=FormatKind.ITALIC,
        shortcut="alt+i",
        description="Wrap the selection in italic markers",
        order=20,
    ),
    ToolbarButton(
        id="format.heading",
        kind=FormatKind.HEADING,
        shortcut="alt+h",
        description="Turn the touched lines into headings",
        order=30,
    ),
    ToolbarButton(
        id="format.bullet_list",
        kind=FormatKind.BULLET_LIST,
        shortcut="alt+l",
        description="Prefix the touched lines with list bullets",
        order=40,
    ),
    ToolbarButton(
        id="format.link",
        kind=FormatKind.LINK,
        shortcut="alt+k",
        description="Insert a link around the selection",
        order=50,
    ),
    ToolbarButton(
        id="format.code",
        kind=FormatKind.CODE,
        shortcut="alt+c",
        description="Wrap the selection in inline code markers",
        order=60,
    ),
    ToolbarButton(
        id="format.quote",
        kind=FormatKind.QUOTE,
        shortcut="alt+q",
        description="Prefix the touched lines with quote markers",
        order=70,
    ),
)


def load_default_toolbar(
    registry: ToolbarRegistry,
    *,
    buttons: Iterable[ToolbarButton] | None = None,
    shortcut_overrides: Mapping[str, str | None] | None = None,
    replace_existing: bool = False,
) -> None:
    """Register the default buttons, optionally remapping their shortcuts.

    ``shortcut_overrides`` maps button ids to a new chord, or ``None`` to
    leave the button without a keyboard shortcut.
    """

    overrides = dict(shortcut_overrides or {})
    for button in buttons or DEFAULT_BUTTONS:
        if button.id in overrides:
            button = replace(button, shortcut=overrides[button.id])
        registry.register_button(button, replace=replace_existing)


__all__ = ["DEFAULT_BUTTONS", "load_default_toolbar"]
