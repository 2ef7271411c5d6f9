"""GitHub operations bound to the workspace repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import httpx

from ghpr.config import GitHubConfig
from ghpr.debug_log import log
from ghpr.git_utils import (
    GitError,
    get_commit_message,
    get_current_branch,
    get_first_commit_on_branch,
    get_remote_url,
    parse_github_remote,
)
from ghpr.github.client import GitHubApiClient
from ghpr.github.errors import ApiResult, GitHubError, Success, failure_from_exception
from ghpr.github.models import PullRequestSummary, RepositoryRef

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from pathlib import Path

    from ghpr.channel import OutputChannel

T = TypeVar("T")


class NotConnectedError(RuntimeError):
    """A GitHub call was attempted before a token was configured."""


class GitHubManager:
    """Remote client for the workspace: owns the token and resolves repo context.

    Every public operation returns an `ApiResult`; exceptions raised by the
    REST client or git are classified at this boundary.
    """

    def __init__(
        self,
        cwd: Path | None,
        channel: OutputChannel,
        config: GitHubConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.cwd = cwd
        self._channel = channel
        self._config = config or GitHubConfig()
        self._transport = transport
        self._token: str | None = None

    @property
    def connected(self) -> bool:
        return bool(self._token)

    def connect(self, token: str | None) -> None:
        self._token = token or None
        log.info("GitHub client initialized", connected=self.connected)

    def _client(self) -> GitHubApiClient:
        if not self._token:
            raise NotConnectedError("GitHub token is not configured")
        return GitHubApiClient(
            self._token,
            base_url=self._config.api_url,
            timeout=self._config.timeout,
            transport=self._transport,
        )

    def _require_root(self) -> Path:
        if self.cwd is None:
            raise GitError("No git repository is open in the workspace")
        return self.cwd

    async def _repository(self, root: Path) -> RepositoryRef:
        url = await get_remote_url(root, self._config.remote)
        owner, name = parse_github_remote(url)
        return RepositoryRef(owner=owner, name=name)

    async def _capture(self, operation: Callable[[], Awaitable[T]]) -> ApiResult[T]:
        try:
            return Success(await operation())
        except (GitHubError, httpx.HTTPError, GitError, NotConnectedError, ValueError) as exc:
            failure = failure_from_exception(exc)
            log.warning("GitHub operation failed", error=failure.message)
            return failure

    async def create_pull_request(self) -> ApiResult[PullRequestSummary | None]:
        return await self._capture(self._create_pull_request)

    async def list_pull_requests(self) -> ApiResult[list[PullRequestSummary]]:
        return await self._capture(self._list_pull_requests)

    async def has_pull_request_for_current_branch(self) -> ApiResult[bool]:
        return await self._capture(self._has_pull_request_for_current_branch)

    async def _list_pull_requests(self) -> list[PullRequestSummary]:
        repo = await self._repository(self._require_root())
        async with self._client() as client:
            return await client.list_pull_requests(repo, state="open")

    async def _has_pull_request_for_current_branch(self) -> bool:
        root = self._require_root()
        repo = await self._repository(root)
        branch = await get_current_branch(root)
        if branch is None:
            return False
        async with self._client() as client:
            pulls = await client.list_pull_requests(repo, head=f"{repo.owner}:{branch}")
        return bool(pulls)

    async def _create_pull_request(self) -> PullRequestSummary | None:
        root = self._require_root()
        repo = await self._repository(root)
        branch = await get_current_branch(root)
        if branch is None:
            raise GitError("No current branch (HEAD is detached)")

        async with self._client() as client:
            base = self._config.default_base_branch or await client.get_default_branch(repo)
            if branch == base:
                self._channel.append_line(
                    f"Not creating a pull request: '{branch}' is the base branch"
                )
                return None

            existing = await client.list_pull_requests(repo, head=f"{repo.owner}:{branch}")
            if existing:
                self._channel.append_line(
                    f"Pull request #{existing[0].number} is already open for '{branch}'"
                )
                return None

            self._channel.append_line(f"Create pull request on branch {branch}")
            first_commit = await get_first_commit_on_branch(root, f"{self._config.remote}/{base}")
            if first_commit is None:
                self._channel.append_line(f"No commits on '{branch}' ahead of '{base}'")
                return None
            self._channel.append_line(f"First commit on branch {first_commit}")

            title, body = await get_commit_message(root, first_commit)
            pull_request = await client.create_pull_request(
                repo,
                head=branch,
                base=base,
                title=title or branch,
                body=body,
            )
        self._channel.append_line(
            f"Created pull request #{pull_request.number} {pull_request.html_url}"
        )
        return pull_request


__all__ = ["GitHubManager", "NotConnectedError"]
