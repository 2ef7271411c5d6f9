"""Gate privileged commands on a connected session and an open workspace."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Concatenate, Final, ParamSpec, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ghpr.session import CommandContext

P = ParamSpec("P")
R = TypeVar("R")

NOT_READY_WARNING: Final = (
    "Please setup your GitHub Personal Access Token and open a GitHub project in your workspace"
)


def is_ready(ctx: CommandContext) -> bool:
    """True when a privileged command may run."""
    return ctx.session.connected and ctx.working_directory is not None


def guarded(
    action: Callable[Concatenate[CommandContext, P], Awaitable[R]],
) -> Callable[Concatenate[CommandContext, P], Awaitable[R | None]]:
    """Wrap a command so it only runs when `is_ready(ctx)`.

    Otherwise a single warning is shown and None is returned. Exceptions from
    the wrapped command propagate unchanged. The wrapper keeps no state.
    """

    @functools.wraps(action)
    async def wrapper(ctx: CommandContext, /, *args: P.args, **kwargs: P.kwargs) -> R | None:
        if not is_ready(ctx):
            ctx.host.show_warning(NOT_READY_WARNING)
            return None
        return await action(ctx, *args, **kwargs)

    return wrapper


__all__ = ["NOT_READY_WARNING", "guarded", "is_ready"]
