"""Pull request commands: create, checkout and browse."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghpr.commands.host import PickItem
from ghpr.commands.reporting import report_failure
from ghpr.debug_log import log
from ghpr.github.errors import DomainFailure, GenericFailure, Success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ghpr.github.models import PullRequestSummary
    from ghpr.session import CommandContext


def pull_request_items(
    pull_requests: Sequence[PullRequestSummary],
) -> list[PickItem[PullRequestSummary]]:
    """Picker rows: title as label, `#number` as description."""
    return [
        PickItem(label=pull_request.title, description=f"#{pull_request.number}", value=pull_request)
        for pull_request in pull_requests
    ]


async def _select_pull_request(ctx: CommandContext) -> PullRequestSummary | None:
    match await ctx.github.list_pull_requests():
        case Success(value=pull_requests):
            selected = await ctx.host.pick(pull_request_items(pull_requests))
            return selected.value if selected is not None else None
        case DomainFailure() | GenericFailure() as failure:
            report_failure(ctx, failure)
            return None


async def create_pull_request(ctx: CommandContext) -> None:
    match await ctx.github.create_pull_request():
        case Success(value=None):
            log.info("Nothing to submit for a pull request")
        case Success(value=pull_request):
            await ctx.status.update(True)
            ctx.host.show_information(f"Successfully created #{pull_request.number}")
        case DomainFailure() | GenericFailure() as failure:
            report_failure(ctx, failure)


async def checkout_pull_request(ctx: CommandContext) -> None:
    """Check out the head branch of a picked pull request.

    Checkout errors are left to the caller; only listing failures are reported here.
    """
    pull_request = await _select_pull_request(ctx)
    if pull_request is None:
        return
    assert ctx.working_directory is not None
    await ctx.git.checkout(ctx.working_directory, pull_request.head_ref)
    ctx.channel.append_line(f"Checked out #{pull_request.number} ({pull_request.head_ref})")
    await ctx.status.update()


async def browse_pull_request(ctx: CommandContext) -> None:
    pull_request = await _select_pull_request(ctx)
    if pull_request is None:
        return
    ctx.host.open_url(pull_request.html_url)


__all__ = [
    "browse_pull_request",
    "checkout_pull_request",
    "create_pull_request",
    "pull_request_items",
]
