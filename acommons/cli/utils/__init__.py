"""CLI utilities for formatting output."""

from acommons.cli.utils.formatters import error, format_bytes, info, success, warning

__all__ = [
    "error",
    "format_bytes",
    "info",
    "success",
    "warning",
]
