"""Toolbar format engine: format kinds and the pure transformations behind them."""

from .engine import apply_format, apply_format_to
from .kinds import FormatKind, FormatStyle

__all__ = ["FormatKind", "FormatStyle", "apply_format", "apply_format_to"]
