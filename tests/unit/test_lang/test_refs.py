"""Unit tests for weak reference helpers."""
from __future__ import annotations

import gc

import pytest

from acommons.core.exceptions import ArgumentException
from acommons.lang.refs import WeakHandle, assign_weak, weak_callback


class Service:
    def __init__(self):
        self.updates = []

    def update(self, value, *, source="timer"):
        self.updates.append((value, source))
        return len(self.updates)


@pytest.mark.unit
class TestWeakHandle:
    """Test suite for WeakHandle."""

    def test_strong_while_alive(self):
        """Test the referent is returned while it exists."""
        service = Service()
        handle = assign_weak(service)

        assert handle.strong() is service
        assert handle.alive

    def test_does_not_keep_object_alive(self):
        """Test the handle becomes dead once the object is collected."""
        service = Service()
        handle = WeakHandle(service)

        del service
        gc.collect()

        assert handle.strong() is None
        assert not handle.alive
        assert repr(handle) == "<WeakHandle dead>"

    def test_use_yields_referent(self):
        """Test use() gives a strong reference for the block."""
        service = Service()
        handle = assign_weak(service)

        with handle.use() as strong:
            assert strong is service

        assert repr(handle) == "<WeakHandle to Service>"

    def test_use_yields_none_when_dead(self):
        """Test use() tolerates a collected referent."""
        handle = assign_weak(Service())
        gc.collect()

        with handle.use() as strong:
            assert strong is None

    def test_bound_method_handle(self):
        """Test bound methods are held via WeakMethod."""
        service = Service()
        handle = WeakHandle(service.update)

        method = handle.strong()
        assert method is not None
        assert method(1) == 1

        del method, service
        gc.collect()

        assert handle.strong() is None

    @pytest.mark.parametrize("value", [1, "text", (1, 2), None])
    def test_unsupported_types(self, value):
        """Test objects without weakref support are rejected."""
        with pytest.raises(ArgumentException):
            WeakHandle(value)


@pytest.mark.unit
class TestWeakCallback:
    """Test suite for weak_callback()."""

    def test_calls_method_while_alive(self):
        """Test arguments and return value pass through."""
        service = Service()
        callback = weak_callback(service.update)

        assert callback(5, source="manual") == 1
        assert service.updates == [(5, "manual")]

    def test_noop_after_collection(self):
        """Test the wrapper returns None once the owner is gone."""
        service = Service()
        callback = weak_callback(service.update)

        del service
        gc.collect()

        assert callback(1) is None

    def test_does_not_keep_owner_alive(self):
        """Test storing the wrapper on the owner does not create a leak."""
        service = Service()
        service.on_tick = weak_callback(service.update)
        handle = assign_weak(service)

        del service
        gc.collect()

        assert not handle.alive

    def test_qualname(self):
        """Test the wrapper is named after the wrapped method."""
        callback = weak_callback(Service().update)

        assert callback.__qualname__ == "weak_callback(Service.update)"

    def test_requires_bound_method(self):
        """Test plain functions are rejected."""

        def plain():
            pass

        with pytest.raises(ArgumentException):
            weak_callback(plain)
