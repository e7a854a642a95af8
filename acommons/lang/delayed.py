"""Delayed execution of a callable with call coalescing.

DelayedExecutor turns bursts of requests into a single run of a callback:

- ``execute_once_after_calm()`` (debounce) runs the callback ``delay``
  seconds after the *last* request of a burst.
- ``execute_once_for_interval()`` (throttle) runs it ``delay`` seconds
  after the *first* request; requests in between are absorbed.

Example:
    save_later = DelayedExecutor(0.5, settings.save, name="settings-save")

    def on_change(key, value):
        settings[key] = value
        save_later.execute_once_after_calm()  # one write per burst of edits
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor
import threading

from acommons.core.exceptions import ArgumentException, require_argument
from acommons.infra.logging.context import get_logger


class DelayedExecutor:
    """Runs ``callback`` once per burst of requests, after ``delay`` seconds.

    The callback runs on a daemon timer thread, or is submitted to
    ``executor`` when one is given. Exceptions raised by the callback on
    that thread are logged with their traceback and do not disable the
    executor.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[], object],
        *,
        executor: Executor | None = None,
        name: str | None = None,
    ) -> None:
        """Initialize delayed executor.

        Args:
            delay: Seconds to wait before running the callback.
            callback: Zero-argument callable to run.
            executor: Optional executor the callback is submitted to.
            name: Name used in logs and timer thread names.

        Raises:
            ArgumentException: If delay is negative or callback is not callable.
        """
        require_argument(delay >= 0, "delay must be >= 0", delay=delay)
        if not callable(callback):
            raise ArgumentException(detail="callback must be callable", extra={"callback": repr(callback)})

        self.delay = delay
        self.callback = callback
        self.executor = executor
        self.name = name or getattr(callback, "__qualname__", repr(callback))
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._log = get_logger(__name__, executor=self.name)

    @property
    def pending(self) -> bool:
        """True while a run is scheduled."""
        with self._lock:
            return self._timer is not None

    def execute_once_after_calm(self) -> None:
        """Schedule a run ``delay`` seconds from now, replacing a pending one."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._arm()

    def execute_once_for_interval(self) -> None:
        """Schedule a run ``delay`` seconds from now unless one is pending."""
        with self._lock:
            if self._timer is None:
                self._arm()

    def flush(self) -> bool:
        """Run a pending callback immediately on the calling thread.

        Exceptions raised by the callback propagate to the caller.

        Returns:
            True if a run was pending and has been executed.
        """
        if not self._disarm():
            return False
        self.callback()
        return True

    def cancel(self) -> bool:
        """Drop a pending run.

        Returns:
            True if a run was pending.
        """
        cancelled = self._disarm()
        if cancelled:
            self._log.debug("Pending run cancelled")
        return cancelled

    def _disarm(self) -> bool:
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
            self._generation += 1
            return True

    def _arm(self) -> None:
        # Caller holds self._lock
        self._generation += 1
        timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
        timer.daemon = True
        timer.name = f"DelayedExecutor[{self.name}]"
        self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer that lost the race against cancel()/re-arm must not run
            if self._timer is None or generation != self._generation:
                return
            self._timer = None

        if self.executor is None:
            self._run()
            return
        try:
            self.executor.submit(self._run)
        except RuntimeError:
            self._log.exception("Executor rejected delayed callback")

    def _run(self) -> None:
        self._log.verbose("Running delayed callback")
        try:
            self.callback()
        except Exception:
            self._log.exception("Delayed callback failed")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, delay={self.delay}, pending={self.pending})"
