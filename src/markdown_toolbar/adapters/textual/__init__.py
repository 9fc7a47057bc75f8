"""Textual host adapter; the runnable app lives in ``.app``."""

from .controller import TextualToolbarAdapter, TextualToolbarHooks

__all__ = ["TextualToolbarAdapter", "TextualToolbarHooks"]
