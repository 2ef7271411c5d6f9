"""Single reporting path for command failures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ghpr.github.errors import DomainFailure, GenericFailure

if TYPE_CHECKING:
    from ghpr.github.errors import Failure
    from ghpr.session import CommandContext

logger = logging.getLogger(__name__)


def report_failure(ctx: CommandContext, failure: Failure) -> None:
    """Log a failure to the output channel, then notify the user.

    Domain failures also dump the raw GitHub response to the diagnostic log.
    Nothing is deduplicated or retried.
    """
    ctx.channel.append_line(failure.message)
    match failure:
        case DomainFailure(message=message, response=response):
            logger.error("GitHub response: %r", response)
            ctx.host.show_error(f"GitHub error: {message}")
        case GenericFailure(message=message):
            ctx.host.show_error(f"Error: {message}")


__all__ = ["report_failure"]
