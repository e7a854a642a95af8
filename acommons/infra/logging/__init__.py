"""Logging infrastructure.

Provides:
- Logger facade with runtime level control and a log folder (Logger.shared())
- Rotating FileLogger that can list, read, roll and clear its files
- configure_logging()/setup_logging() built on dictConfig with
  QueueHandler + QueueListener for non-blocking I/O
- Automatic context injection (set_log_context) and JSONL output
- A VERBOSE level below DEBUG

Basic usage:
    import logging

    from acommons.infra.logging import configure_logging, set_log_context

    configure_logging(log_level="DEBUG", file_path="logs/app.log")
    set_log_context(job="import")
    logging.getLogger(__name__).info("Started")  # includes job="import"
"""

from acommons.infra.logging.config import (
    complete,
    configure_logging,
    get_file_logger,
    setup_logging,
    shutdown,
)
from acommons.infra.logging.context import (
    ContextBoundLogger,
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    get_logger,
    remove_from_log_context,
    set_log_context,
    update_log_context,
)
from acommons.infra.logging.file_logger import FileLogger
from acommons.infra.logging.formatters import JSONFormatter, text_formatter
from acommons.infra.logging.levels import VERBOSE, LogLevel
from acommons.infra.logging.logger import Logger

__all__ = [
    "VERBOSE",
    "ContextBoundLogger",
    "ContextInjectingFilter",
    "FileLogger",
    "JSONFormatter",
    "LogLevel",
    "Logger",
    "clear_log_context",
    "complete",
    "configure_logging",
    "get_file_logger",
    "get_log_context",
    "get_logger",
    "remove_from_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
    "text_formatter",
    "update_log_context",
]
