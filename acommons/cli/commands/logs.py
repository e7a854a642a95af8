"""Log folder commands."""

from pathlib import Path

import click

from acommons.cli.utils import format_bytes, info, success, warning
from acommons.infra.logging.file_logger import DEFAULT_FILE_NAME, FileLogger


def _file_logger(directory: Path, file_name: str) -> FileLogger:
    return FileLogger(directory, file_name=file_name)


@click.group(name="logs")
def logs() -> None:
    """Inspect and clean rotating log folders."""


@logs.command(name="list")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
@click.option("--file-name", default=DEFAULT_FILE_NAME, show_default=True, help="Active log file name.")
def list_cmd(directory: Path, file_name: str) -> None:
    """List log files in DIRECTORY, newest first."""
    paths = _file_logger(directory, file_name).log_file_paths()
    if not paths:
        info(f"No log files in {directory}")
        return
    for path in paths:
        click.echo(f"{path}\t{format_bytes(path.stat().st_size)}")


@logs.command(name="show")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
@click.option("--file-name", default=DEFAULT_FILE_NAME, show_default=True, help="Active log file name.")
def show_cmd(directory: Path, file_name: str) -> None:
    """Print every log file in DIRECTORY, oldest first."""
    click.echo(_file_logger(directory, file_name).read_logs(), nl=False)


@logs.command(name="clear")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
@click.option("--file-name", default=DEFAULT_FILE_NAME, show_default=True, help="Active log file name.")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
def clear_cmd(directory: Path, file_name: str, yes: bool) -> None:
    """Delete the log files in DIRECTORY."""
    file_logger = _file_logger(directory, file_name)
    if not yes:
        click.confirm(f"Delete log files in {directory}?", abort=True)
    removed = file_logger.clear()
    if not removed:
        warning(f"No log files in {directory}")
        return
    success(f"Removed {removed} log file(s)")
