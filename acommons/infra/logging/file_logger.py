"""Rotating file logger with log-folder management.

A FileLogger owns one directory containing an active log file and its
numbered backups (``app.log``, ``app.log.1``, ``app.log.2``...). Besides
providing the logging handler it can list, read, roll and remove those
files, which is what "send logs" and "clear logs" features need.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import threading

from acommons.core.exceptions import require_argument
from acommons.infra.logging.formatters import JSONFormatter, text_formatter
from acommons.infra.logging.levels import LogLevel

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "acommons.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5


class FileLogger:
    """Rotating log files in a single directory.

    The handler is created lazily with ``delay=True``, so no file appears
    on disk until the first record is written.

    Example:
            file_logger = FileLogger("/var/log/app", backup_count=3)
        logging.getLogger("acommons").addHandler(file_logger.handler)
        ...
        for path in file_logger.log_file_paths():
            print(path)
    """

    def __init__(
        self,
        directory: str | Path,
        *,
        file_name: str = DEFAULT_FILE_NAME,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
        json_logs: bool = False,
        level: LogLevel | int | str = LogLevel.VERBOSE,
        service_name: str = "acommons",
    ) -> None:
        """Initialize file logger.

        Args:
            directory: Folder for the active log file and its backups.
            file_name: Name of the active log file.
            max_bytes: Size that triggers rotation. 0 disables size-based rotation.
            backup_count: Number of rotated files to keep.
            json_logs: Write JSON Lines instead of text.
            level: Minimum level written by the handler.
            service_name: Static "service" field for JSON records.

        Raises:
            ArgumentException: On an invalid file name, size or backup count.
        """
        require_argument(
            bool(file_name) and Path(file_name).name == file_name,
            "file_name must be a plain file name",
            file_name=file_name,
        )
        require_argument(max_bytes >= 0, "max_bytes must be >= 0", max_bytes=max_bytes)
        require_argument(backup_count >= 0, "backup_count must be >= 0", backup_count=backup_count)

        self.directory = Path(directory)
        self.file_name = file_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.json_logs = json_logs
        self.level = LogLevel.parse(level)
        self.service_name = service_name
        self._handler: RotatingFileHandler | None = None
        self._lock = threading.Lock()

    @property
    def current_log_file(self) -> Path:
        """Path of the active log file."""
        return self.directory / self.file_name

    @property
    def handler(self) -> RotatingFileHandler:
        """Rotating handler writing into the directory, created on first use."""
        with self._lock:
            if self._handler is None:
                self.directory.mkdir(parents=True, exist_ok=True)
                handler = RotatingFileHandler(
                    self.current_log_file,
                    maxBytes=self.max_bytes,
                    backupCount=self.backup_count,
                    encoding="utf-8",
                    delay=True,
                )
                handler.setLevel(int(self.level))
                if self.json_logs:
                    handler.setFormatter(JSONFormatter(static={"service": self.service_name}))
                else:
                    handler.setFormatter(text_formatter())
                self._handler = handler
            return self._handler

    def log_file_paths(self) -> list[Path]:
        """Return existing log files, newest first.

        The active file comes first, followed by backups in rotation order
        (``.1`` is the most recent backup).
        """
        paths: list[tuple[int, Path]] = []
        current = self.current_log_file
        if current.is_file():
            paths.append((0, current))
        if self.directory.is_dir():
            for candidate in self.directory.glob(f"{self.file_name}.*"):
                suffix = candidate.name[len(self.file_name) + 1 :]
                if suffix.isdigit() and candidate.is_file():
                    paths.append((int(suffix), candidate))
        return [path for _, path in sorted(paths)]

    def read_logs(self) -> str:
        """Return the content of every log file, oldest to newest."""
        self.flush()
        return "".join(
            path.read_text(encoding="utf-8", errors="replace")
            for path in reversed(self.log_file_paths())
        )

    def flush(self) -> None:
        """Flush buffered records of the handler, if it exists."""
        if self._handler is not None:
            self._handler.flush()

    def roll(self) -> None:
        """Force a rollover of the active file.

        With backup_count == 0 the handler keeps writing to the same file.
        """
        handler = self.handler
        handler.acquire()
        try:
            handler.doRollover()
        finally:
            handler.release()
        logger.debug("Rolled log file %s", self.current_log_file)

    def clear(self) -> int:
        """Close the handler and delete every log file.

        Returns:
            Number of files removed.
        """
        self.close()
        removed = 0
        for path in self.log_file_paths():
            path.unlink(missing_ok=True)
            removed += 1
        return removed

    def close(self) -> None:
        """Close the active file. The next record written reopens it."""
        with self._lock:
            if self._handler is not None:
                self._handler.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(directory={str(self.directory)!r}, file_name={self.file_name!r})"
