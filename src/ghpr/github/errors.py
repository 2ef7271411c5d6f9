"""Failure taxonomy and result types for GitHub operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")


class GitHubError(Exception):
    """The GitHub service rejected a request.

    `response` carries the structured detail returned by the API,
    e.g. ``{"status": 422, "body": {...}}``.
    """

    def __init__(self, message: str, response: dict[str, Any]) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status(self) -> int | None:
        return self.response.get("status")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class DomainFailure:
    """GitHub itself rejected the request."""

    message: str
    response: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GenericFailure:
    """Transport error, git failure, malformed payload or unexpected exception."""

    message: str
    error: BaseException | None = field(default=None, compare=False)


Failure: TypeAlias = "DomainFailure | GenericFailure"
ApiResult: TypeAlias = "Success[T] | DomainFailure | GenericFailure"


def failure_from_exception(exc: BaseException) -> Failure:
    """Classify a raised exception into a failure variant."""
    if isinstance(exc, GitHubError):
        return DomainFailure(exc.message, exc.response)
    return GenericFailure(str(exc) or type(exc).__name__, exc)


__all__ = [
    "ApiResult",
    "DomainFailure",
    "Failure",
    "GenericFailure",
    "GitHubError",
    "Success",
    "failure_from_exception",
]
