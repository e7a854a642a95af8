"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolated environment and settings caches
    - Logging Fixtures: clean logging state between tests
    - File System Fixtures: lock and log directories under tmp_path
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
import os
from pathlib import Path

import pytest

from acommons.core.settings import clear_all_caches
from acommons.infra.logging import Logger, clear_log_context, shutdown

# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[None]:
    """Keep settings independent from the developer's environment.

    Points the YAML config directories at an empty folder, drops LOG_/LOCK_
    variables and clears the cached settings before and after each test.
    """
    for key in list(os.environ):
        if key.startswith(("LOG_", "LOCK_")):
            monkeypatch.delenv(key, raising=False)
    empty_conf = tmp_path_factory.mktemp("empty-conf")
    monkeypatch.setenv("LOG_CONFIG_DIR", str(empty_conf))
    monkeypatch.setenv("LOCK_CONFIG_DIR", str(empty_conf))
    monkeypatch.chdir(tmp_path)

    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Restore the logging tree after each test."""
    root = logging.getLogger()
    root_level = root.level
    library_logger = logging.getLogger("acommons")
    library_level = library_logger.level

    yield

    shutdown()
    logging.captureWarnings(False)
    clear_log_context()
    for name, instance in list(Logger._instances.items()):
        instance.detach_file_logger()
        Logger._instances.pop(name, None)
    library_logger.setLevel(library_level)
    root.setLevel(root_level)
    root.filters.clear()


# ============================================================================
# File System Fixtures
# ============================================================================


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Directory for log files (not created)."""
    return tmp_path / "logs"


@pytest.fixture
def lock_path(tmp_path: Path) -> Path:
    """Lock file path inside a directory that does not exist yet."""
    return tmp_path / "locks" / "test.lock"
