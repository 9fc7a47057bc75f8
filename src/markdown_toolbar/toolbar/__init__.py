"""Toolbar buttons, their registry and the controller that dispatches presses."""

from .controller import ToolbarBus, ToolbarController, ToolbarPress
from .defaults import DEFAULT_BUTTONS, load_default_toolbar
from .models import ToolbarButton, normalize_shortcut
from .registry import RegistryStats, ToolbarConflictError, ToolbarRegistry

__all__ = [
    "DEFAULT_BUTTONS",
    "RegistryStats",
    "ToolbarBus",
    "ToolbarButton",
    "ToolbarConflictError",
    "ToolbarController",
    "ToolbarPress",
    "ToolbarRegistry",
    "load_default_toolbar",
    "normalize_shortcut",
]
