"""Tests for the top-level package surface."""

import os
from pathlib import Path
import subprocess
import sys

import pytest

import acommons


@pytest.mark.unit
def test_all_names_resolve():
    """Test every exported name exists on the package."""
    missing = [name for name in acommons.__all__ if not hasattr(acommons, name)]

    assert missing == []
    assert len(acommons.__all__) == len(set(acommons.__all__))


@pytest.mark.unit
def test_lang_names_reexported():
    """Test the lang helpers are available from the top level."""
    import acommons.lang

    assert set(acommons.lang.__all__) <= set(acommons.__all__)


@pytest.mark.unit
def test_import_has_no_side_effects(tmp_path):
    """Test importing configures no handlers, starts no threads and writes no files."""
    code = (
        "import logging, threading, acommons\n"
        "assert threading.active_count() == 1, threading.enumerate()\n"
        "assert logging.getLogger().handlers == []\n"
        "assert logging.getLogger('acommons').handlers == []\n"
    )

    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=tmp_path,
        env={**os.environ, "PYTHONPATH": str(Path(acommons.__file__).parent.parent)},
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert list(tmp_path.iterdir()) == []
