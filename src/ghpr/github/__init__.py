"""GitHub REST integration: models, failures, client and workspace manager."""

from ghpr.github.errors import (
    ApiResult,
    DomainFailure,
    Failure,
    GenericFailure,
    GitHubError,
    Success,
    failure_from_exception,
)
from ghpr.github.manager import GitHubManager
from ghpr.github.models import PullRequestSummary, RepositoryRef

__all__ = [
    "ApiResult",
    "DomainFailure",
    "Failure",
    "GenericFailure",
    "GitHubError",
    "GitHubManager",
    "PullRequestSummary",
    "RepositoryRef",
    "Success",
    "failure_from_exception",
]
