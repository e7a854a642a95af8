"""Wildcard matching commands."""

import click

from acommons.cli.utils import error
from acommons.core.exceptions import WildcardPatternException
from acommons.lang.wildcard import Wildcard


@click.group(name="wildcard")
def wildcard() -> None:
    """Match text against * and ? patterns."""


@wildcard.command(name="match")
@click.argument("pattern")
@click.argument("texts", nargs=-1, required=True)
@click.option("--case-sensitive", is_flag=True, help="Match letter case exactly.")
def match_cmd(pattern: str, texts: tuple[str, ...], case_sensitive: bool) -> None:
    """Print each of TEXTS that matches PATTERN.

    Exits with status 1 when nothing matches.

    \b
    Examples:
      acommons wildcard match '*.example.com' ads.example.com example.org
      acommons wildcard match --case-sensitive 'Report-??.pdf' Report-01.pdf
    """
    try:
        compiled = Wildcard(pattern, case_sensitive=case_sensitive)
    except WildcardPatternException as e:
        error(e.detail)
        raise SystemExit(2) from e

    matched = [text for text in texts if compiled.matches(text)]
    for text in matched:
        click.echo(text)
    if not matched:
        raise SystemExit(1)
