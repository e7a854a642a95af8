"""CLI command modules."""

from acommons.cli.commands import dates, lock, logs, punycode, wildcard

__all__ = [
    "dates",
    "lock",
    "logs",
    "punycode",
    "wildcard",
]
