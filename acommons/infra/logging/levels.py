"""Log levels used by the library logger.

Adds a VERBOSE level below DEBUG for very chatty tracing output and
registers its name with the logging module on import.
"""

from __future__ import annotations

from enum import IntEnum
import logging

from acommons.core.exceptions import ArgumentException

VERBOSE = 5

logging.addLevelName(VERBOSE, "VERBOSE")

_ALIASES = {
    "WARN": "WARNING",
    "TRACE": "VERBOSE",
    "FATAL": "CRITICAL",
    "DEFAULT": "INFO",
}


class LogLevel(IntEnum):
    """Library log levels, ordered by severity."""

    VERBOSE = VERBOSE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def parse(cls, value: LogLevel | int | str) -> LogLevel:
        """Convert a level name or number into a LogLevel.

        Args:
            value: LogLevel, numeric level or case-insensitive name
                (WARN, TRACE, FATAL and DEFAULT are accepted aliases).

        Raises:
            ArgumentException: If the value does not name a known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ArgumentException(
                    detail=f"Unknown log level: {value}",
                    extra={"level": value},
                ) from None
        name = str(value).strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ArgumentException(
                detail=f"Unknown log level: {value!r}",
                extra={"level": value},
            ) from None

    @classmethod
    def nearest(cls, levelno: int) -> LogLevel:
        """Return the most severe LogLevel not above ``levelno``."""
        candidates = [level for level in cls if level <= levelno]
        return max(candidates) if candidates else cls.VERBOSE
