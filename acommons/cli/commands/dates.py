"""Date conversion commands."""

import json

import click

from acommons.cli.utils import error
from acommons.core.exceptions import ArgumentException
from acommons.lang.dates import from_http_date, from_iso_string, to_http_date, to_iso_string


@click.group(name="dates")
def dates() -> None:
    """Parse and convert dates."""


@dates.command(name="parse")
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def parse_cmd(text: str, as_json: bool) -> None:
    """Parse TEXT (ISO 8601 or HTTP date) and print both forms in UTC."""
    try:
        parsed = from_iso_string(text)
    except ArgumentException:
        try:
            parsed = from_http_date(text)
        except ArgumentException as e:
            error(f"Unrecognized date: {text}")
            raise SystemExit(1) from e

    result = {"iso": to_iso_string(parsed), "http": to_http_date(parsed)}
    if as_json:
        click.echo(json.dumps(result))
    else:
        click.echo(f"ISO 8601: {result['iso']}")
        click.echo(f"HTTP:     {result['http']}")
