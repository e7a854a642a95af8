"""Weak/strong reference helpers for callbacks.

A callback stored on (or reachable from) the object it calls back into
keeps that object alive. The helpers here hold the object weakly while
the callback is built and only take a strong reference for the duration
of a call, tolerating the object being gone by then.

Example:
    class FiltersService:
        def __init__(self, scheduler):
            # The scheduler does not keep the service alive
            scheduler.every(3600, weak_callback(self.update_filters))

    handle = assign_weak(service)
    with handle.use() as strong_service:
        if strong_service is not None:
            strong_service.update_filters()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
import inspect
from typing import Any, Generic, TypeVar
import weakref

from acommons.core.exceptions import ArgumentException

T = TypeVar("T")


class WeakHandle(Generic[T]):
    """Non-owning handle to an object or a bound method."""

    __slots__ = ("_ref",)

    def __init__(self, obj: T) -> None:
        """Create a handle for ``obj``.

        Raises:
            ArgumentException: If ``obj`` cannot be weakly referenced.
        """
        try:
            if inspect.ismethod(obj):
                self._ref: Callable[[], T | None] = weakref.WeakMethod(obj)
            else:
                self._ref = weakref.ref(obj)
        except TypeError as e:
            raise ArgumentException(
                detail=f"Cannot create a weak reference to {type(obj).__name__}",
                extra={"type": type(obj).__name__},
            ) from e

    def strong(self) -> T | None:
        """Return the referent, or None once it has been collected."""
        return self._ref()

    @property
    def alive(self) -> bool:
        """True while the referent exists."""
        return self._ref() is not None

    @contextmanager
    def use(self) -> Iterator[T | None]:
        """Yield the referent, keeping it alive for the whole ``with`` block."""
        strong = self._ref()
        try:
            yield strong
        finally:
            del strong

    def __repr__(self) -> str:
        target = self._ref()
        state = "dead" if target is None else f"to {type(target).__name__}"
        return f"<{self.__class__.__name__} {state}>"


def assign_weak(obj: T) -> WeakHandle[T]:
    """Return a WeakHandle for ``obj``."""
    return WeakHandle(obj)


def weak_callback(method: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a bound method so the wrapper does not keep its owner alive.

    Calling the wrapper calls the method while the owner exists and is a
    no-op returning None afterwards.

    Raises:
        ArgumentException: If ``method`` is not a bound method.
    """
    if not inspect.ismethod(method):
        raise ArgumentException(
            detail="weak_callback() expects a bound method",
            extra={"callable": repr(method)},
        )
    handle: WeakHandle[Callable[..., Any]] = WeakHandle(method)

    def call(*args: Any, **kwargs: Any) -> Any:
        strong = handle.strong()
        if strong is None:
            return None
        return strong(*args, **kwargs)

    call.__qualname__ = f"weak_callback({method.__qualname__})"
    return call
