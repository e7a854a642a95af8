"""Library logger facade.

``Logger.shared()`` wraps the ``acommons`` stdlib logger and adds the
operations applications usually want from a logging singleton: changing
the level at runtime, pointing logs at a folder, flushing before sending
logs somewhere, and short ``log_*`` class methods.

Example:
    from acommons import Logger, LogLevel

    Logger.shared().init_logger("/var/log/myapp")
    Logger.shared().level = LogLevel.DEBUG

    Logger.log_info("(FiltersService) - init start")
    Logger.log_error("(FiltersService) - update failed: %s", error)
"""

from __future__ import annotations

import logging
from pathlib import Path
import threading
from typing import Any, ClassVar

from acommons.infra.logging.config import complete
from acommons.infra.logging.file_logger import (
    DEFAULT_BACKUP_COUNT,
    DEFAULT_FILE_NAME,
    DEFAULT_MAX_BYTES,
    FileLogger,
)
from acommons.infra.logging.levels import LogLevel

ROOT_LOGGER_NAME = "acommons"


class Logger:
    """Named logger with runtime level control and an optional file folder."""

    _instances: ClassVar[dict[str, Logger]] = {}
    _instances_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, name: str = ROOT_LOGGER_NAME) -> None:
        self.name = name
        self._logger = logging.getLogger(name)
        self._file_logger: FileLogger | None = None
        self._lock = threading.Lock()

    @classmethod
    def shared(cls, name: str = ROOT_LOGGER_NAME) -> Logger:
        """Return the process-wide Logger for ``name``."""
        with cls._instances_lock:
            instance = cls._instances.get(name)
            if instance is None:
                instance = cls(name)
                cls._instances[name] = instance
            return instance

    @property
    def stdlib_logger(self) -> logging.Logger:
        """The wrapped ``logging.Logger``."""
        return self._logger

    @property
    def level(self) -> LogLevel:
        """Effective level of the wrapped logger."""
        return LogLevel.nearest(self._logger.getEffectiveLevel())

    @level.setter
    def level(self, value: LogLevel | int | str) -> None:
        self._logger.setLevel(int(LogLevel.parse(value)))

    @property
    def file_logger(self) -> FileLogger | None:
        """FileLogger attached by init_logger(), if any."""
        return self._file_logger

    def init_logger(
        self,
        folder: str | Path,
        *,
        file_name: str = DEFAULT_FILE_NAME,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
        json_logs: bool = False,
    ) -> FileLogger:
        """Write this logger's records into rotating files under ``folder``.

        A FileLogger attached by an earlier call is detached and closed.
        When no level is set on this logger it is set to INFO, otherwise
        records would be filtered by the inherited root level (WARNING by
        default). An explicitly configured level is left alone.

        Returns:
            The new FileLogger.
        """
        file_logger = FileLogger(
            folder,
            file_name=file_name,
            max_bytes=max_bytes,
            backup_count=backup_count,
            json_logs=json_logs,
            service_name=self.name,
        )
        with self._lock:
            previous = self._file_logger
            if previous is not None:
                self._logger.removeHandler(previous.handler)
                previous.close()
            self._logger.addHandler(file_logger.handler)
            self._file_logger = file_logger
            if self._logger.level == logging.NOTSET:
                self._logger.setLevel(int(LogLevel.INFO))
        self._logger.debug("Logging into %s", file_logger.current_log_file)
        return file_logger

    def detach_file_logger(self) -> None:
        """Detach and close the FileLogger attached by init_logger()."""
        with self._lock:
            if self._file_logger is not None:
                self._logger.removeHandler(self._file_logger.handler)
                self._file_logger.close()
                self._file_logger = None

    def flush(self) -> None:
        """Wait for queued records and flush the file output."""
        complete()
        if self._file_logger is not None:
            self._file_logger.flush()

    def log(self, level: LogLevel | int | str, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.log(int(LogLevel.parse(level)), msg, *args, **kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.error(msg, *args, **kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.warning(msg, *args, **kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.info(msg, *args, **kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.debug(msg, *args, **kwargs)

    def verbose(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self._logger.log(int(LogLevel.VERBOSE), msg, *args, **kwargs)

    @classmethod
    def log_error(cls, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        cls.shared().error(msg, *args, **kwargs)

    @classmethod
    def log_warning(cls, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        cls.shared().warning(msg, *args, **kwargs)

    @classmethod
    def log_info(cls, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        cls.shared().info(msg, *args, **kwargs)

    @classmethod
    def log_debug(cls, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        cls.shared().debug(msg, *args, **kwargs)

    @classmethod
    def log_verbose(cls, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        cls.shared().verbose(msg, *args, **kwargs)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, level={self.level.name})"
