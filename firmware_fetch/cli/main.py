"""firmware_fetch CLI"""

import click

from firmware_fetch import __version__
from firmware_fetch.cli.checkout import checkout, list_checkouts, locate_git

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="firmware_fetch")
@click.pass_context
def cli(ctx):
    """
    Fetch firmware sources from git repositories.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(checkout))
cli.add_command(add_debug_option(locate_git))
cli.add_command(add_debug_option(list_checkouts))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
