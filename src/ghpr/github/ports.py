"""Port for the remote pull request client used by command handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ghpr.github.errors import ApiResult
    from ghpr.github.models import PullRequestSummary


class PullRequestClient(Protocol):
    """Remote hosting operations the commands rely on."""

    @property
    def connected(self) -> bool:
        """True when a non-empty token has been used to initialize the client."""
        ...

    def connect(self, token: str | None) -> None:
        """(Re)initialize the client with a token; never validates it."""
        ...

    async def create_pull_request(self) -> ApiResult[PullRequestSummary | None]:
        """Open a pull request for the current branch; `Success(None)` when nothing to submit."""
        ...

    async def list_pull_requests(self) -> ApiResult[list[PullRequestSummary]]:
        """List open pull requests of the workspace repository."""
        ...

    async def has_pull_request_for_current_branch(self) -> ApiResult[bool]:
        """Check whether the current branch already has an open pull request."""
        ...


__all__ = ["PullRequestClient"]
