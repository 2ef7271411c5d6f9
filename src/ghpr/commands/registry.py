"""Command ids, palette titles and their handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ghpr.commands.guard import guarded
from ghpr.commands.handlers import (
    browse_pull_request,
    checkout_pull_request,
    create_pull_request,
)
from ghpr.commands.token import set_github_token

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ghpr.session import CommandContext


@dataclass(frozen=True, slots=True)
class CommandSpec:
    command_id: str
    title: str
    help_text: str
    key: str
    handler: Callable[[CommandContext], Awaitable[None]]


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        "setGitHubToken",
        "GitHub: Set Personal Access Token",
        "Store the token used for GitHub requests",
        "t",
        set_github_token,
    ),
    CommandSpec(
        "createPullRequest",
        "GitHub: Create Pull Request",
        "Open a pull request for the current branch",
        "c",
        guarded(create_pull_request),
    ),
    CommandSpec(
        "checkoutPullRequests",
        "GitHub: Checkout Pull Request",
        "Pick an open pull request and check out its branch",
        "o",
        guarded(checkout_pull_request),
    ),
    CommandSpec(
        "browserPullRequest",
        "GitHub: Browse Pull Request",
        "Pick an open pull request and open it in the browser",
        "b",
        guarded(browse_pull_request),
    ),
)

COMMANDS_BY_ID: dict[str, CommandSpec] = {spec.command_id: spec for spec in COMMANDS}


def get_command(command_id: str) -> CommandSpec:
    """Look up a command by id. Raises KeyError for unknown ids."""
    return COMMANDS_BY_ID[command_id]


__all__ = ["COMMANDS", "COMMANDS_BY_ID", "CommandSpec", "get_command"]
