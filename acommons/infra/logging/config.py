"""Logging configuration setup.

Provides logging configuration using:
- dictConfig for the root logger, its level and filters
- QueueHandler + QueueListener for non-blocking I/O
- ContextInjectingFilter for automatic context propagation
- A FileLogger for the rotating file output
"""

from __future__ import annotations

import atexit
import logging
import logging.config
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import Queue
import sys
import time
from typing import IO, TYPE_CHECKING, Any

from acommons.infra.logging.context import ContextInjectingFilter
from acommons.infra.logging.file_logger import (
    DEFAULT_BACKUP_COUNT,
    DEFAULT_MAX_BYTES,
    FileLogger,
)
from acommons.infra.logging.formatters import JSONFormatter, text_formatter
from acommons.infra.logging.levels import LogLevel

if TYPE_CHECKING:
    from acommons.core.settings.logs import LoggingSettings

_log_queue: Queue[logging.LogRecord] | None = None
_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None
_handlers: list[logging.Handler] = []
_file_logger: FileLogger | None = None
_atexit_registered = False
_LOGGING_INITIALIZED = False

logger = logging.getLogger(__name__)


def complete(max_wait: float = 5.0) -> None:
    """Wait for all queued log records to be processed.

    Blocks until the QueueListener has handled every pending record or
    ``max_wait`` seconds have passed, then flushes the handlers.

    Example:
            configure_logging(log_level="INFO", file_path="logs/app.log")
        logging.getLogger(__name__).info("Shutting down")
        complete()  # Wait for all logs to be written
    """
    if _log_queue is None or _listener is None:
        return

    deadline = time.monotonic() + max_wait
    # QueueListener calls task_done() after each handled record
    while _log_queue.unfinished_tasks and time.monotonic() < deadline:
        time.sleep(0.01)

    for handler in _handlers:
        handler.flush()


def shutdown() -> None:
    """Stop the QueueListener and close the handlers it drives.

    Registered with atexit by configure_logging(); safe to call repeatedly.
    """
    global _log_queue, _listener, _queue_handler, _file_logger, _LOGGING_INITIALIZED

    if _listener is not None:
        complete()
        _listener.stop()
        _listener = None

    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler = None

    for handler in _handlers:
        handler.close()
    _handlers.clear()

    _file_logger = None
    _log_queue = None
    _LOGGING_INITIALIZED = False


def get_file_logger() -> FileLogger | None:
    """Return the FileLogger created by the last configure_logging() call."""
    return _file_logger


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from acommons.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: LogLevel | int | str = "INFO",
    console_level: LogLevel | int | str | None = None,
    file_level: LogLevel | int | str | None = None,
    file_path: str | Path | None = None,
    json_logs: bool = False,
    console_enabled: bool = True,
    include_context: bool = True,
    capture_warnings: bool = True,
    include_function_name: bool = False,
    include_process_info: bool = False,
    include_thread_info: bool = False,
    file_max_bytes: int = DEFAULT_MAX_BYTES,
    file_backup_count: int = DEFAULT_BACKUP_COUNT,
    service_name: str = "acommons",
    stream: IO[str] | None = None,
    **kwargs: Any,
) -> None:
    """Configure logging with dictConfig and the QueueHandler pattern.

    Reconfiguring replaces the previous setup: the old listener is stopped
    and its handlers are closed first.

    Args:
        log_level: Root logger level (VERBOSE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console_level: Console handler level. If None, uses log_level.
        file_level: File handler level. If None, uses log_level.
        file_path: Path to the active log file. None disables file logging.
        json_logs: Enable JSONL (JSON Lines) structured logging.
        console_enabled: Enable console logging.
        include_context: Enable ContextInjectingFilter for auto context.
        capture_warnings: Forward Python warnings to logging system.
        include_function_name: Include function name in records.
        include_process_info: Include process ID and name in records.
        include_thread_info: Include thread ID and name in records.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        service_name: Static "service" field in JSON records.
        stream: Console stream. Defaults to sys.stderr.
        **kwargs: Unknown settings, logged and ignored.

    Example:
            from acommons.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())

        # Or: direct parameters with per-handler levels
        configure_logging(log_level="VERBOSE", console_level="ERROR", file_path="logs/app.log")
    """
    global _log_queue, _listener, _queue_handler, _file_logger, _atexit_registered

    shutdown()

    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs)))

    if capture_warnings:
        logging.captureWarnings(True)

    root_level = LogLevel.parse(log_level)
    console_lvl = LogLevel.parse(console_level) if console_level is not None else root_level
    file_lvl = LogLevel.parse(file_level) if file_level is not None else root_level

    filters_config: dict[str, Any] = {}
    root_filters: list[str] = []
    if include_context:
        filters_config["context"] = {
            "()": "acommons.infra.logging.context.ContextInjectingFilter",
        }
        root_filters.append("context")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": filters_config,
            "root": {
                "level": int(root_level),
                "handlers": [],
                "filters": root_filters,
            },
        }
    )

    def build_formatter() -> logging.Formatter:
        if json_logs:
            fmt_keys = {"level": "levelname", "logger": "name", "message": "message"}
            if include_function_name:
                fmt_keys["function"] = "funcName"
            return JSONFormatter(
                fmt_keys=fmt_keys,
                static={"service": service_name},
                include_process_info=include_process_info,
                include_thread_info=include_thread_info,
            )
        return text_formatter(
            include_function_name=include_function_name,
            include_process_info=include_process_info,
            include_thread_info=include_thread_info,
        )

    if console_enabled:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(int(console_lvl))
        console_handler.setFormatter(build_formatter())
        _handlers.append(console_handler)

    if file_path:
        path = Path(file_path)
        _file_logger = FileLogger(
            path.parent,
            file_name=path.name,
            max_bytes=file_max_bytes,
            backup_count=file_backup_count,
            json_logs=json_logs,
            level=file_lvl,
            service_name=service_name,
        )
        file_handler = _file_logger.handler
        file_handler.setFormatter(build_formatter())
        _handlers.append(file_handler)

    if not _handlers:
        return

    _log_queue = Queue()
    _listener = QueueListener(_log_queue, *_handlers, respect_handler_level=True)
    _listener.start()

    if not _atexit_registered:
        atexit.register(shutdown)
        _atexit_registered = True

    _queue_handler = QueueHandler(_log_queue)
    if include_context:
        # Logger filters only see records logged on that logger, not propagated ones
        _queue_handler.addFilter(ContextInjectingFilter())
    logging.getLogger().addHandler(_queue_handler)
