"""Registry holding the toolbar's buttons and their lookup indexes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, Optional

from markdown_toolbar.runtime.telemetry import toolbar_span

from .models import ToolbarButton, normalize_shortcut


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    button_count: int
    shortcut_count: int
    kinds: tuple[str, ...]


class ToolbarConflictError(RuntimeError):
    """Raised when a button's label or shortcut is already taken."""

    def __init__(self, button: ToolbarButton, conflicts: Iterable[ToolbarButton]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Button '{button.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.button = button
        self.conflicts = conflicts_tuple


class ToolbarRegistry:
    """Owns toolbar buttons, indexed by id, label and shortcut."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._buttons: Dict[str, ToolbarButton] = {}
        self._labels: Dict[str, str] = {}
        self._shortcuts: Dict[str, str] = {}
        self._sequence: Dict[str, int] = {}
        self._logger_name = logger_name
        self._revision = 0
        self._counter = 0

    def revision(self) -> int:
        return self._revision

    def get_button(self, button_id: str) -> ToolbarButton:
        try:
            return self._buttons[button_id]
        except KeyError as exc:
            raise KeyError(f"Button '{button_id}' is not registered") from exc

    def find(self, reference: str) -> ToolbarButton:
        """Look a button up by id first, then by label (case-insensitive)."""

        if reference in self._buttons:
            return self._buttons[reference]
        button_id = self._labels.get(reference.strip().casefold())
        if button_id is None:
            raise KeyError(f"No toolbar button for '{reference}'")
        return self._buttons[button_id]

    def find_by_shortcut(self, shortcut: str) -> ToolbarButton:
        button_id = self._shortcuts.get(normalize_shortcut(shortcut))
        if button_id is None:
            raise KeyError(f"No toolbar button bound to '{shortcut}'")
        return self._buttons[button_id]

    def register_button(
        self, button: ToolbarButton, *, replace: bool = False
    ) -> ToolbarButton:
        with toolbar_span(
            "register_button",
            logger_name=self._logger_name,
            button_id=button.id,
            kind=button.kind.name,
        ) as handle:
            conflicts = self.detect_conflicts(button)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise ToolbarConflictError(button, conflicts)

            if replace:
                for conflict in conflicts:
                    self._drop(conflict)
                existing = self._buttons.get(button.id)
                if existing:
                    self._drop(existing)
            elif button.id in self._buttons:
                raise ValueError(f"Button id '{button.id}' already registered")

            self._store(button)
            self._touch()
            return button

    def unregister_button(self, button_id: str) -> Optional[ToolbarButton]:
        with toolbar_span(
            "unregister_button", logger_name=self._logger_name, button_id=button_id
        ):
            button = self._buttons.get(button_id)
            if not button:
                return None
            self._drop(button)
            self._touch()
            return button

    def update_button(self, button_id: str, **changes: object) -> ToolbarButton:
        with toolbar_span(
            "update_button", logger_name=self._logger_name, button_id=button_id
        ) as handle:
            if button_id not in self._buttons:
                raise KeyError(f"Button '{button_id}' not found")
            if "id" in changes and changes["id"] != button_id:
                raise ValueError("button id cannot be changed")

            current = self._buttons[button_id]
            updated = replace(current, **changes)
            conflicts = self.detect_conflicts(updated)
            if conflicts:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise ToolbarConflictError(updated, conflicts)

            sequence = self._sequence[button_id]
            self._drop(current)
            self._store(updated, sequence=sequence)
            self._touch()
            return updated

    def iter_buttons(self) -> Iterator[ToolbarButton]:
        """Yield buttons by ``order``, then registration order."""

        ordered = sorted(
            self._buttons.values(),
            key=lambda button: (button.order, self._sequence[button.id]),
        )
        yield from ordered

    def labels(self) -> tuple[str, ...]:
        return tuple(button.label for button in self.iter_buttons())

    def stats(self) -> RegistryStats:
        return RegistryStats(
            button_count=len(self._buttons),
            shortcut_count=len(self._shortcuts),
            kinds=tuple(sorted({b.kind.name for b in self._buttons.values()})),
        )

    def detect_conflicts(self, button: ToolbarButton) -> list[ToolbarButton]:
        conflicts: list[ToolbarButton] = []
        label_owner = self._labels.get(button.label_key)
        if label_owner is not None and label_owner != button.id:
            conflicts.append(self._buttons[label_owner])
        if button.shortcut is not None:
            shortcut_owner = self._shortcuts.get(button.shortcut)
            if (
                shortcut_owner is not None
                and shortcut_owner != button.id
                and shortcut_owner != label_owner
            ):
                conflicts.append(self._buttons[shortcut_owner])
        return conflicts

    def _store(self, button: ToolbarButton, *, sequence: int | None = None) -> None:
        if sequence is None:
            self._counter += 1
            sequence = self._counter
        self._buttons[button.id] = button
        self._sequence[button.id] = sequence
        self._labels[button.label_key] = button.id
        if button.shortcut is not None:
            self._shortcuts[button.shortcut] = button.id

    def _drop(self, button: ToolbarButton) -> None:
        self._buttons.pop(button.id, None)
        self._sequence.pop(button.id, None)
        if self._labels.get(button.label_key) == button.id:
            self._labels.pop(button.label_key, None)
        if button.shortcut is not None and self._shortcuts.get(button.shortcut) == (
            button.id
        ):
            self._shortcuts.pop(button.shortcut, None)

    def _touch(self) -> None:
        self._revision += 1


__all__ = [
    "ToolbarRegistry",
    "ToolbarConflictError",
    "RegistryStats",
]
