"""Inter-process advisory file locking.

FileLocker takes an exclusive ``flock`` on a lock file. Every instance
opens its own descriptor, so two lockers on the same path exclude each
other whether they live in different processes or in the same one.

Example:
    with FileLocker("/run/myapp/filters.lock"):
        rebuild_filters()

    locker = locked_path("db-migration")
    if locker.wait_lock(timeout=5.0):
        try:
            migrate()
        finally:
            locker.unlock()
"""

from __future__ import annotations

import errno
import fcntl
import os
from pathlib import Path
import threading
import time
from types import TracebackType

from acommons.core.exceptions import FileLockException, require_argument
from acommons.core.settings import get_lock_settings
from acommons.infra.logging.context import get_logger

_WOULD_BLOCK = {errno.EAGAIN, errno.EACCES, errno.EWOULDBLOCK}


class FileLocker:
    """Exclusive advisory lock on ``path``."""

    def __init__(self, path: str | Path, *, poll_interval: float | None = None) -> None:
        """Initialize file locker. Nothing is opened until a lock is requested.

        Args:
            path: Lock file path. Parent directories are created on demand.
            poll_interval: Seconds between attempts in wait_lock().
                Defaults to LockSettings.poll_interval.
        """
        if poll_interval is not None:
            require_argument(poll_interval > 0, "poll_interval must be > 0", poll_interval=poll_interval)
        self.path = Path(path)
        self._poll_interval = poll_interval
        self._fd: int | None = None
        self._lock = threading.Lock()
        self._log = get_logger(__name__, lock_path=str(self.path))

    @property
    def poll_interval(self) -> float:
        """Seconds between try_lock() attempts in wait_lock()."""
        if self._poll_interval is not None:
            return self._poll_interval
        return get_lock_settings().poll_interval

    @property
    def locked(self) -> bool:
        """True while this instance holds the lock."""
        return self._fd is not None

    def lock(self) -> bool:
        """Block until the lock is acquired.

        Returns:
            True once the lock is held.

        Raises:
            FileLockException: If the lock file cannot be opened or locked.
        """
        return self._acquire(blocking=True)

    def try_lock(self) -> bool:
        """Acquire the lock without waiting.

        Returns:
            True if the lock is now held, False if someone else holds it.

        Raises:
            FileLockException: If the lock file cannot be opened or locked.
        """
        return self._acquire(blocking=False)

    def wait_lock(self, timeout: float) -> bool:
        """Try to acquire the lock for up to ``timeout`` seconds.

        Returns:
            True if the lock was acquired in time.
        """
        require_argument(timeout >= 0, "timeout must be >= 0", timeout=timeout)
        deadline = time.monotonic() + timeout
        while True:
            if self.try_lock():
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                self._log.debug("Timed out waiting for lock after %.2fs", timeout)
                return False
            time.sleep(min(self.poll_interval, remaining))

    def unlock(self) -> bool:
        """Release the lock and close the descriptor.

        Returns:
            False if this instance did not hold the lock.
        """
        with self._lock:
            fd = self._fd
            if fd is None:
                return False
            self._fd = None
            try:
                fcntl.flock(fd, fcntl.LOCK_UN)
            finally:
                os.close(fd)
        self._log.debug("Lock released")
        return True

    def _acquire(self, *, blocking: bool) -> bool:
        with self._lock:
            if self._fd is not None:
                return True

        # The instance mutex must not be held while flock may block
        fd = self._open()
        flags = fcntl.LOCK_EX if blocking else fcntl.LOCK_EX | fcntl.LOCK_NB
        try:
            fcntl.flock(fd, flags)
        except OSError as e:
            os.close(fd)
            if not blocking and e.errno in _WOULD_BLOCK:
                return False
            raise FileLockException(
                detail=f"Cannot lock {self.path}: {e.strerror}",
                extra={"path": str(self.path), "errno": e.errno},
            ) from e

        with self._lock:
            if self._fd is not None:
                # Another thread published its descriptor first
                os.close(fd)
                return True
            self._fd = fd

        self._log.debug("Lock acquired")
        return True

    def _open(self) -> int:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            return os.open(self.path, os.O_RDWR | os.O_CREAT, 0o644)
        except OSError as e:
            raise FileLockException(
                detail=f"Cannot open lock file {self.path}: {e.strerror}",
                extra={"path": str(self.path), "errno": e.errno},
            ) from e

    def __enter__(self) -> FileLocker:
        timeout = get_lock_settings().default_timeout
        if timeout is None:
            self.lock()
        elif not self.wait_lock(timeout):
            raise FileLockException(
                detail=f"Timed out after {timeout}s waiting for {self.path}",
                extra={"path": str(self.path), "timeout": timeout},
            )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unlock()

    def __del__(self) -> None:
        fd = getattr(self, "_fd", None)
        if fd is not None:
            os.close(fd)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.path)!r}, locked={self.locked})"


def locked_path(name: str) -> FileLocker:
    """Return a FileLocker for ``<LockSettings.directory>/<name>.lock``.

    Raises:
        ArgumentException: If name is empty or contains a path separator.
    """
    require_argument(
        bool(name) and Path(name).name == name,
        "lock name must be a plain file name",
        name=name,
    )
    return FileLocker(get_lock_settings().directory / f"{name}.lock")
