"""Startup wiring: build the command context and the first-run token hint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import httpx

from ghpr.channel import OutputChannel
from ghpr.debug_log import log
from ghpr.git_utils import GitCheckout, has_git_repo
from ghpr.github.manager import GitHubManager
from ghpr.session import CommandContext, Session
from ghpr.state import TOKEN_KEY, VERSION_KEY, GlobalState
from ghpr.status import PullRequestStatus

if TYPE_CHECKING:
    from pathlib import Path

    from ghpr.commands.host import EditorHost
    from ghpr.config import GhprConfig

CHANNEL_NAME: Final = "github"
BANNER: Final = "ghpr - GitHub pull requests"
TOKEN_HINT: Final = "To enable GitHub support, please set a Personal Access Token"


async def activate(
    host: EditorHost,
    project_root: Path | None,
    *,
    config: GhprConfig,
    state: GlobalState | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CommandContext:
    """Build the command context for a workspace.

    The working directory is only set when project_root is a git work tree.
    A persisted token, if any, is bound to the session immediately.
    """
    working_directory = None
    if project_root is not None and await has_git_repo(project_root):
        working_directory = project_root

    channel = OutputChannel(CHANNEL_NAME)
    channel.append_line(BANNER)

    github = GitHubManager(working_directory, channel, config.github, transport=transport)
    session = Session()
    status = PullRequestStatus(github)

    state = await (state or GlobalState()).load()
    token = state.get(TOKEN_KEY)
    if token:
        session.bind(token, github)

    log.info(
        "Activated",
        working_directory=str(working_directory) if working_directory else None,
        connected=session.connected,
    )
    return CommandContext(
        session=session,
        working_directory=working_directory,
        github=github,
        git=GitCheckout(config.github.remote),
        host=host,
        channel=channel,
        status=status,
        state=state,
    )


async def check_version_and_token(ctx: CommandContext, version: str) -> bool:
    """Show the token hint once per new version while no token is configured.

    Returns True when the hint was shown.
    """
    stored_version = ctx.state.get(VERSION_KEY)
    if version == stored_version or ctx.session.token:
        return False
    await ctx.state.update(VERSION_KEY, version)
    ctx.host.show_information(TOKEN_HINT)
    return True


__all__ = ["BANNER", "CHANNEL_NAME", "TOKEN_HINT", "activate", "check_version_and_token"]
