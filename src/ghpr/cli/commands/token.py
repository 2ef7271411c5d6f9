"""Store the GitHub token without opening the TUI."""

from __future__ import annotations

import asyncio

import click

from ghpr.state import TOKEN_KEY, GlobalState


async def _store_token(value: str) -> None:
    state = await GlobalState().load()
    await state.update(TOKEN_KEY, value)


@click.command()
@click.option(
    "--token",
    "value",
    prompt="GitHub Personal Access Token",
    hide_input=True,
    default="",
    show_default=False,
    help="Token value (prompted with hidden input when omitted)",
)
def token(value: str) -> None:
    """Set the GitHub Personal Access Token."""
    asyncio.run(_store_token(value))
    if value:
        click.secho("Token saved.", fg="green")
    else:
        click.secho("Empty token saved; GitHub commands stay disabled.", fg="yellow")
