"""Unit tests for logging context helpers."""
from __future__ import annotations

import logging

import pytest

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
from acommons.infra.logging.levels import VERBOSE


def make_record(**attrs):
    record = logging.LogRecord("acommons.test", logging.INFO, __file__, 1, "msg", None, None)
    record.__dict__.update(attrs)
    return record


@pytest.mark.unit
class TestLogContext:
    """Test suite for the context variable helpers."""

    def test_set_and_get(self):
        """Test fields accumulate across calls."""
        set_log_context(job="import")
        update_log_context(attempt=2)

        assert get_log_context() == {"job": "import", "attempt": 2}

    def test_get_returns_copy(self):
        """Test mutating the returned dict does not change the context."""
        set_log_context(job="import")
        get_log_context()["job"] = "changed"

        assert get_log_context() == {"job": "import"}

    def test_remove_and_clear(self):
        """Test removal of single keys and the whole context."""
        set_log_context(a=1, b=2)
        remove_from_log_context("a", "missing")

        assert get_log_context() == {"b": 2}

        clear_log_context()

        assert get_log_context() == {}


@pytest.mark.unit
class TestContextInjectingFilter:
    """Test suite for ContextInjectingFilter."""

    def test_injects_context(self):
        """Test context fields are copied onto the record."""
        set_log_context(job="import")
        record = make_record()

        assert ContextInjectingFilter().filter(record) is True
        assert record.job == "import"

    def test_does_not_overwrite_record_fields(self):
        """Test existing attributes win over context."""
        set_log_context(job="import", levelname="HACKED")
        record = make_record(job="explicit")

        ContextInjectingFilter().filter(record)

        assert record.job == "explicit"
        assert record.levelname == "INFO"


@pytest.mark.unit
class TestContextBoundLogger:
    """Test suite for ContextBoundLogger."""

    def test_bound_context_in_records(self, caplog):
        """Test bound fields reach the record."""
        log = get_logger("acommons.test.bound", lock_path="/tmp/a.lock")

        with caplog.at_level(logging.DEBUG, logger="acommons.test.bound"):
            log.debug("Lock acquired")

        assert caplog.records[-1].lock_path == "/tmp/a.lock"

    def test_bind_merges(self):
        """Test bind() returns a new logger with merged context."""
        log = get_logger("acommons.test.bind", executor="save")
        child = log.bind(attempt=2)

        assert isinstance(child, ContextBoundLogger)
        assert child.extra == {"executor": "save", "attempt": 2}
        assert log.extra == {"executor": "save"}

    def test_call_extra_wins(self, caplog):
        """Test per-call extra overrides bound fields."""
        log = get_logger("acommons.test.extra", attempt=1)

        with caplog.at_level(logging.INFO, logger="acommons.test.extra"):
            log.info("Retrying", extra={"attempt": 3})

        assert caplog.records[-1].attempt == 3

    def test_verbose(self, caplog):
        """Test the VERBOSE helper logs at level 5."""
        log = get_logger("acommons.test.verbose")

        with caplog.at_level(VERBOSE, logger="acommons.test.verbose"):
            log.verbose("Very chatty %s", "detail")

        record = caplog.records[-1]
        assert record.levelno == VERBOSE
        assert record.levelname == "VERBOSE"
        assert record.getMessage() == "Very chatty detail"
