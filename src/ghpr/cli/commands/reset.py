"""Forget the stored token and notification state."""

from __future__ import annotations

import click

from ghpr.state import GlobalState


@click.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def reset(force: bool) -> None:
    """Delete persisted ghpr state (token, last notified version)."""
    state = GlobalState()
    if not force and not click.confirm(f"Delete {state.path}?", default=False):
        click.echo("Aborted.")
        return
    if state.clear():
        click.secho(f"Removed {state.path}", fg="green")
    else:
        click.echo("Nothing to reset.")
