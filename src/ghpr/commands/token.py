"""Personal access token provisioning."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ghpr.debug_log import log
from ghpr.state import TOKEN_KEY

if TYPE_CHECKING:
    from ghpr.session import CommandContext

TOKEN_PLACEHOLDER: Final = "GitHub Personal Access Token"


async def set_github_token(ctx: CommandContext) -> None:
    """Prompt for a token, persist it and rebind the session.

    Any submitted value is accepted, including the empty string; a bad token
    only shows up when a later command fails. Cancelling changes nothing.
    """
    value = await ctx.host.prompt_secret(TOKEN_PLACEHOLDER)
    if value is None:
        log.info("Token prompt cancelled")
        return
    await ctx.state.update(TOKEN_KEY, value)
    ctx.session.bind(value, ctx.github)
    log.info("GitHub token updated", connected=ctx.session.connected)
    await ctx.status.update()


__all__ = ["TOKEN_PLACEHOLDER", "set_github_token"]
