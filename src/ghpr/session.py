"""Session state and the context threaded through every command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ghpr.channel import OutputChannel
    from ghpr.commands.host import EditorHost, RepositoryCheckout, StatusIndicator
    from ghpr.github.ports import PullRequestClient
    from ghpr.state import GlobalState


@dataclass(slots=True)
class Session:
    """Current authentication token and whether the remote client is usable.

    `connected` is only ever derived from the client after `bind`, so it is
    true iff a non-empty token initialized the client.
    """

    token: str | None = None
    connected: bool = False

    def bind(self, token: str | None, client: PullRequestClient) -> None:
        """Adopt a token and (re)initialize the remote client with it."""
        self.token = token
        client.connect(token)
        self.connected = client.connected


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Everything a command may touch. Commands never mutate it, only the session."""

    session: Session
    working_directory: Path | None
    github: PullRequestClient
    git: RepositoryCheckout
    host: EditorHost
    channel: OutputChannel
    status: StatusIndicator
    state: GlobalState


__all__ = ["CommandContext", "Session"]
