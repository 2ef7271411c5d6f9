"""Read-only projections of GitHub REST resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PullRequestSummary:
    """One pull request as shown in pickers and notifications."""

    number: int
    title: str
    head_ref: str
    html_url: str

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"Pull request number must be >= 1, got {self.number}")

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> PullRequestSummary:
        """Build from a REST pull request object.

        Raises:
            ValueError: required fields are missing or mistyped.
        """
        try:
            number = payload["number"]
            title = payload["title"]
            head_ref = payload["head"]["ref"]
            html_url = payload["html_url"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed pull request payload: missing {exc}") from exc
        if not isinstance(number, int) or isinstance(number, bool):
            raise ValueError(f"Malformed pull request payload: number={number!r}")
        return cls(
            number=number,
            title=str(title),
            head_ref=str(head_ref),
            html_url=str(html_url),
        )


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    """owner/name coordinates of a GitHub repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


__all__ = ["PullRequestSummary", "RepositoryRef"]
