"""httpx-backed client for the GitHub REST endpoints ghpr needs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import httpx

from ghpr.config import DEFAULT_API_URL
from ghpr.debug_log import log
from ghpr.github.errors import GitHubError
from ghpr.github.models import PullRequestSummary, RepositoryRef
from ghpr.limits import HTTP_TIMEOUT, PULL_REQUESTS_PER_PAGE

if TYPE_CHECKING:
    from types import TracebackType

GITHUB_API_VERSION: Final = "2022-11-28"
USER_AGENT: Final = "ghpr"


def _error_message(response: httpx.Response, body: Any) -> str:
    if isinstance(body, dict) and body.get("message"):
        message = str(body["message"])
        errors = body.get("errors")
        if isinstance(errors, list):
            details = [
                str(item.get("message") or item.get("code"))
                for item in errors
                if isinstance(item, dict) and (item.get("message") or item.get("code"))
            ]
            if details:
                message = f"{message} ({'; '.join(details)})"
        return message
    return f"{response.status_code} {response.reason_phrase}"


class GitHubApiClient:
    """Authenticated REST client; use as an async context manager.

    Usage:
        async with GitHubApiClient(token) as client:
            pulls = await client.list_pull_requests(repo)
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
                "User-Agent": USER_AGENT,
            },
        )

    async def __aenter__(self) -> GitHubApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            GitHubError: GitHub answered with a non-2xx status.
            httpx.HTTPError: the request never got a response.
        """
        log.debug("GitHub request", method=method, path=path)
        response = await self._http.request(method, path, params=params, json=json)
        try:
            body: Any = response.json() if response.content else None
        except ValueError:
            body = response.text

        if response.is_error:
            raise GitHubError(
                _error_message(response, body),
                {"status": response.status_code, "url": str(response.url), "body": body},
            )
        return body

    async def get_repository(self, repo: RepositoryRef) -> dict[str, Any]:
        body = await self.request("GET", f"/repos/{repo.owner}/{repo.name}")
        if not isinstance(body, dict):
            raise ValueError(f"Unexpected repository payload for {repo.full_name}")
        return body

    async def get_default_branch(self, repo: RepositoryRef) -> str:
        body = await self.get_repository(repo)
        return str(body.get("default_branch") or "main")

    async def list_pull_requests(
        self,
        repo: RepositoryRef,
        *,
        state: str = "open",
        head: str | None = None,
    ) -> list[PullRequestSummary]:
        params: dict[str, Any] = {"state": state, "per_page": PULL_REQUESTS_PER_PAGE}
        if head:
            params["head"] = head
        body = await self.request("GET", f"/repos/{repo.owner}/{repo.name}/pulls", params=params)
        if not isinstance(body, list):
            raise ValueError(f"Unexpected pull request list payload for {repo.full_name}")
        return [PullRequestSummary.from_api(item) for item in body]

    async def create_pull_request(
        self,
        repo: RepositoryRef,
        *,
        head: str,
        base: str,
        title: str,
        body: str = "",
    ) -> PullRequestSummary:
        payload = await self.request(
            "POST",
            f"/repos/{repo.owner}/{repo.name}/pulls",
            json={"head": head, "base": base, "title": title, "body": body},
        )
        if not isinstance(payload, dict):
            raise ValueError("Unexpected create pull request payload")
        return PullRequestSummary.from_api(payload)


__all__ = ["GITHUB_API_VERSION", "GitHubApiClient"]
