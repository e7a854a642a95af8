"""Main CLI entry point for acommons utility commands."""

import click

from acommons import __version__
from acommons.cli.commands import dates, lock, logs, punycode, wildcard
from acommons.cli.utils import error
from acommons.core.exceptions import ACommonsException
from acommons.infra.logging.config import setup_logging


class ACommonsGroup(click.Group):
    """Command group that reports library errors instead of tracebacks."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except ACommonsException as e:
            error(e.detail)
            raise SystemExit(1) from e


@click.group(cls=ACommonsGroup)
@click.version_option(version=__version__, prog_name="acommons")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """acommons - command line access to the common utilities.

    \b
    Command Groups:
      punycode   Punycode / IDNA conversion for labels, domains and URLs
      wildcard   Match text against * and ? patterns
      dates      Parse and convert dates
      lock       Run commands under an advisory file lock
      logs       Inspect and clean rotating log folders

    \b
    Quick Start:
      acommons punycode encode-domain пример.рф
      acommons wildcard match '*.example.com' ads.example.com
      acommons lock run /tmp/job.lock -- ./job.sh
    """
    ctx.ensure_object(dict)


cli.add_command(punycode.punycode)
cli.add_command(wildcard.wildcard)
cli.add_command(dates.dates)
cli.add_command(lock.lock)
cli.add_command(logs.logs)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
