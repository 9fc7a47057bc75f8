from __future__ import annotations

import pytest

from markdown_toolbar.formatting import FormatKind
from markdown_toolbar.toolbar import (
    DEFAULT_BUTTONS,
    ToolbarButton,
    ToolbarConflictError,
    ToolbarRegistry,
    load_default_toolbar,
    normalize_shortcut,
)


def make_button(
    button_id: str = "format.bold",
    *,
    kind: FormatKind = FormatKind.BOLD,
    label: str = "",
    shortcut: str | None = None,
    order: int = 0,
) -> ToolbarButton:
    return ToolbarButton(
        id=button_id, kind=kind, label=label, shortcut=shortcut, order=order
    )


def test_default_toolbar_shows_every_kind_in_order() -> None:
    registry = ToolbarRegistry()
    load_default_toolbar(registry)

    assert registry.labels() == (
        "Bold",
        "Italic",
        "Heading",
        "Bullet List",
        "Link",
        "Code",
        "Quote",
    )
    assert {button.kind for button in registry.iter_buttons()} == set(FormatKind)
    assert registry.stats().button_count == len(DEFAULT_BUTTONS)
    assert registry.stats().shortcut_count == len(DEFAULT_BUTTONS)


def test_default_toolbar_shortcut_overrides() -> None:
    registry = ToolbarRegistry()
    load_default_toolbar(
        registry,
        shortcut_overrides={"format.bold": "ctrl+b", "format.quote": None},
    )

    assert registry.find_by_shortcut("ctrl+b").id == "format.bold"
    assert registry.get_button("format.quote").shortcut is None
    with pytest.raises(KeyError):
        registry.find_by_shortcut("alt+b")


def test_button_defaults_label_to_kind() -> None:
    button = make_button("format.list", kind=FormatKind.BULLET_LIST)

    assert button.label == "Bullet List"


def test_button_validation() -> None:
    with pytest.raises(ValueError):
        make_button("")
    with pytest.raises(TypeError):
        ToolbarButton(id="x", kind="bold")  # type: ignore[arg-type]


def test_normalize_shortcut() -> None:
    assert normalize_shortcut("B+Alt") == "alt+b"
    assert normalize_shortcut("shift+ctrl+K") == "ctrl+shift+k"
    with pytest.raises(ValueError):
        normalize_shortcut(" + ")


def test_find_by_id_or_label() -> None:
    registry = ToolbarRegistry()
    load_default_toolbar(registry)

    assert registry.find("format.link").kind is FormatKind.LINK
    assert registry.find("bullet list").kind is FormatKind.BULLET_LIST
    assert registry.find_by_shortcut("K+ALT").kind is FormatKind.LINK
    with pytest.raises(KeyError):
        registry.find("Strikethrough")


def test_register_label_conflict() -> None:
    registry = ToolbarRegistry()
    registry.register_button(make_button())

    with pytest.raises(ToolbarConflictError) as excinfo:
        registry.register_button(make_button("format.strong"))

    assert [button.id for button in excinfo.value.conflicts] == ["format.bold"]


def test_register_shortcut_conflict() -> None:
    registry = ToolbarRegistry()
    registry.register_button(make_button(shortcut="alt+b"))

    with pytest.raises(ToolbarConflictError):
        registry.register_button(
            make_button("format.code", kind=FormatKind.CODE, shortcut="b+alt")
        )


def test_register_duplicate_id_rejected() -> None:
    registry = ToolbarRegistry()
    registry.register_button(make_button())

    with pytest.raises(ValueError):
        registry.register_button(
            make_button(kind=FormatKind.CODE, label="Monospace")
        )


def test_register_replace_evicts_conflicts() -> None:
    registry = ToolbarRegistry()
    registry.register_button(make_button(shortcut="alt+b"))

    replacement = make_button("format.strong", label="Bold", shortcut="alt+s")
    registry.register_button(replacement, replace=True)

    assert registry.find("Bold") is replacement
    assert registry.stats().button_count == 1
    with pytest.raises(KeyError):
        registry.find_by_shortcut("alt+b")


def test_unregister_button() -> None:
    registry = ToolbarRegistry()
    button = registry.register_button(make_button(shortcut="alt+b"))
    revision = registry.revision()

    assert registry.unregister_button("format.bold") is button
    assert registry.unregister_button("format.bold") is None
    assert registry.revision() == revision + 1
    with pytest.raises(KeyError):
        registry.find_by_shortcut("alt+b")


def test_update_button_keeps_position() -> None:
    registry = ToolbarRegistry()
    load_default_toolbar(registry)

    updated = registry.update_button("format.heading", label="Title", shortcut="alt+t")

    assert updated.label == "Title"
    assert registry.labels()[2] == "Title"
    assert registry.find("title") is updated
    with pytest.raises(KeyError):
        registry.find("Heading")


def test_update_button_conflict_leaves_registry_intact() -> None:
    registry = ToolbarRegistry()
    load_default_toolbar(registry)

    with pytest.raises(ToolbarConflictError):
        registry.update_button("format.heading", shortcut="alt+b")

    assert registry.get_button("format.heading").shortcut == "alt+h"
    with pytest.raises(KeyError):
        registry.update_button("format.strike", label="Strike")
