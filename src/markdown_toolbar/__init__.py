"""Markdown toolbar engine: pure formatting transforms plus toolbar plumbing."""

from markdown_toolbar.formatting import FormatKind, apply_format, apply_format_to

__all__ = [
    "adapters",
    "buffer",
    "formatting",
    "toolbar",
    "runtime",
    "FormatKind",
    "apply_format",
    "apply_format_to",
]

__version__ = "0.1.0"
