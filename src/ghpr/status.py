"""Pull request indicator state for the current branch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghpr.debug_log import log
from ghpr.github.errors import DomainFailure, GenericFailure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from ghpr.github.ports import PullRequestClient


class PullRequestStatus:
    """Tracks whether the current branch has an open pull request.

    `has_open_pr` is None while unknown (not connected, or the last lookup failed).
    """

    def __init__(self, github: PullRequestClient) -> None:
        self._github = github
        self.has_open_pr: bool | None = None
        self._listeners: list[Callable[[PullRequestStatus], None]] = []

    @property
    def connected(self) -> bool:
        return self._github.connected

    def subscribe(self, listener: Callable[[PullRequestStatus], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def update(self, has_open_pr: bool | None = None) -> None:
        """Apply an explicit value, or recompute it from GitHub when omitted."""
        if has_open_pr is None:
            has_open_pr = await self._recompute()
        self.has_open_pr = has_open_pr
        for listener in list(self._listeners):
            listener(self)

    async def _recompute(self) -> bool | None:
        if not self._github.connected:
            return None
        match await self._github.has_pull_request_for_current_branch():
            case Success(value=value):
                return value
            case DomainFailure(message=message) | GenericFailure(message=message):
                log.warning("Could not refresh pull request status", error=message)
                return None


__all__ = ["PullRequestStatus"]
