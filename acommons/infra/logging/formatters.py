"""Custom logging formatters."""
from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
from typing import Any

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# LogRecord attributes that are not copied into JSON output as extra fields
_SKIP_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    }
)


class JSONFormatter(logging.Formatter):
    """Structured JSON Lines (JSONL) formatter with UTC timestamps.

    Formats log records as one JSON object per line, ready for ingestion
    by log aggregation systems.

    Features:
    - UTC timestamps in ISO 8601 format with millisecond precision
    - Automatic inclusion of context from ContextInjectingFilter
    - Optional process/thread information
    - Exception stack traces kept on a single line

    Example output:
        ```json
        {"level": "INFO", "logger": "acommons.lang.file_locker", "message": "Lock acquired", "timestamp": "2025-01-01T00:00:00.123Z", "lock_path": "/tmp/a.lock"}
        ```
    """

    def __init__(
        self,
        fmt_keys: dict[str, str] | None = None,
        static: dict[str, Any] | None = None,
        include_process_info: bool = False,
        include_thread_info: bool = False,
    ) -> None:
        """Initialize JSON formatter.

        Args:
            fmt_keys: Mapping of output keys to LogRecord attributes.
                Default: {"level": "levelname", "logger": "name", "message": "message"}
            static: Static fields to include in every log record (e.g., {"service": "acommons"}).
            include_process_info: Include process ID and name.
            include_thread_info: Include thread ID and name.
        """
        super().__init__()
        self.fmt_keys = fmt_keys or {
            "level": "levelname",
            "logger": "name",
            "message": "message",
        }
        self.static = static or {}
        self.include_process_info = include_process_info
        self.include_thread_info = include_thread_info

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        data: dict[str, Any] = {
            k: getattr(record, v, None) for k, v in self.fmt_keys.items()
        }

        data["timestamp"] = (
            datetime.fromtimestamp(record.created, tz=UTC)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )

        if self.include_process_info:
            data["process_id"] = record.process
            data["process_name"] = record.processName

        if self.include_thread_info:
            data["thread_id"] = record.thread
            data["thread_name"] = record.threadName

        # Keep JSONL: one line per record
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info).replace("\n", "\\n")

        if record.stack_info:
            data["stack_trace"] = record.stack_info.replace("\n", "\\n")

        if self.static:
            data.update(self.static)

        for key, value in record.__dict__.items():
            if key not in _SKIP_KEYS and key not in data:
                data[key] = value

        return json.dumps(data, ensure_ascii=False, default=str)


def text_formatter(
    include_function_name: bool = False,
    include_process_info: bool = False,
    include_thread_info: bool = False,
) -> logging.Formatter:
    """Build the human-readable formatter used for console and file output."""
    format_parts = ["%(asctime)s", "%(levelname)s", "%(name)s"]

    if include_function_name:
        format_parts.append("%(funcName)s")
    if include_process_info:
        format_parts.append("[%(processName)s:%(process)d]")
    if include_thread_info:
        format_parts.append("[%(threadName)s:%(thread)d]")

    format_parts.append("%(message)s")
    return logging.Formatter(fmt=" - ".join(format_parts), datefmt=TEXT_DATEFMT)
