"""File lock commands."""

from pathlib import Path
import subprocess

import click

from acommons.cli.utils import error, info
from acommons.lang.file_locker import FileLocker


@click.group(name="lock")
def lock() -> None:
    """Serialize commands with an advisory file lock."""


@lock.command(
    name="run",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Give up after this many seconds instead of waiting forever.",
)
def run_cmd(path: Path, command: tuple[str, ...], timeout: float | None) -> None:
    """Run COMMAND while holding the lock on PATH.

    Exits with the command's status, or 1 when the lock is not acquired.

    \b
    Examples:
      acommons lock run /tmp/backup.lock -- rsync -a src/ dst/
      acommons lock run --timeout 10 /tmp/import.lock ./import.sh
    """
    locker = FileLocker(path)
    acquired = locker.lock() if timeout is None else locker.wait_lock(timeout)

    if not acquired:
        error(f"Timed out after {timeout}s waiting for {path}")
        raise SystemExit(1)

    try:
        info(f"Lock acquired: {path}")
        completed = subprocess.run(list(command), check=False)
    finally:
        locker.unlock()
    raise SystemExit(completed.returncode)
