"""Context management for structured logging.

Context set with set_log_context() is stored in a ContextVar and copied
onto every LogRecord by ContextInjectingFilter, so code deep inside a call
chain (a lock wait, a delayed callback) logs with the identifiers of the
operation that triggered it without passing them around.
"""

from __future__ import annotations

from contextvars import ContextVar
import logging
from typing import Any

from acommons.infra.logging.levels import VERBOSE

_log_context: ContextVar[dict[str, Any]] = ContextVar("acommons_log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the logging context of the current thread/task.

    Example:
        ```python
        set_log_context(job="nightly-import")
        logger.info("Waiting for lock")  # record carries job="nightly-import"
        ```
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Drop every field from the current logging context."""
    _log_context.set({})


def update_log_context(**kwargs: Any) -> None:
    """Alias for set_log_context() when adding to an existing context."""
    set_log_context(**kwargs)


def remove_from_log_context(*keys: str) -> None:
    """Remove specific keys from the logging context."""
    current = _log_context.get().copy()
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


class ContextInjectingFilter(logging.Filter):
    """Logging filter that copies the current log context onto each record.

    Installed on the root logger by configure_logging() when
    include_context is enabled. Existing record attributes are never
    overwritten.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class ContextBoundLogger(logging.LoggerAdapter):
    """Logger adapter with permanently bound context fields.

    Example:
        ```python
        log = ContextBoundLogger(logging.getLogger(__name__), lock_path="/tmp/a.lock")
        log.debug("Lock acquired")  # record carries lock_path
        log.bind(attempt=2).debug("Retrying")
        ```
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        super().__init__(logger, context)

    def bind(self, **context: Any) -> ContextBoundLogger:
        """Create a new logger with additional bound context."""
        merged = {**self.extra, **context}
        return ContextBoundLogger(self.logger, **merged)

    def verbose(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log ``msg`` at VERBOSE level."""
        self.log(VERBOSE, msg, *args, **kwargs)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        # Per-call extra wins over bound context
        extra = kwargs.get("extra", {})
        kwargs["extra"] = {**self.extra, **extra}
        return msg, kwargs


def get_logger(name: str, **context: Any) -> ContextBoundLogger:
    """Get a logger with bound context.

    Example:
        ```python
        logger = get_logger(__name__, executor="settings-save")
        logger.info("Callback scheduled")
        ```
    """
    return ContextBoundLogger(logging.getLogger(name), **context)
