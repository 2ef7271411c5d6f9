"""Command dispatch and session guard layer."""

from ghpr.commands.guard import NOT_READY_WARNING, guarded, is_ready
from ghpr.commands.handlers import browse_pull_request, checkout_pull_request, create_pull_request
from ghpr.commands.host import EditorHost, PickItem
from ghpr.commands.reporting import report_failure
from ghpr.commands.token import set_github_token

__all__ = [
    "NOT_READY_WARNING",
    "EditorHost",
    "PickItem",
    "browse_pull_request",
    "checkout_pull_request",
    "create_pull_request",
    "guarded",
    "is_ready",
    "report_failure",
    "set_github_token",
]
