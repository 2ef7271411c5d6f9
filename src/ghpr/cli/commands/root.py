"""The ``ghpr`` command group."""

from __future__ import annotations

import click

from ghpr.version import installed_version

from .reset import reset
from .token import token
from .tui import tui


@click.group(invoke_without_command=True)
@click.version_option(installed_version(), prog_name="ghpr", message="%(prog)s %(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """GitHub pull requests from the terminal.

    Without a subcommand, opens the TUI for the current directory.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


for command in (tui, token, reset):
    cli.add_command(command)
