"""Ports for the UI surfaces and local collaborators commands use."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PickItem(Generic[T]):
    """One row of a single-select picker."""

    label: str
    description: str
    value: T


class EditorHost(Protocol):
    """Notification, prompt, picker and browser surfaces of the host UI."""

    def show_information(self, message: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    async def prompt_secret(self, placeholder: str) -> str | None:
        """Masked input that survives focus loss; None when cancelled."""
        ...

    async def pick(self, items: Sequence[PickItem[T]]) -> PickItem[T] | None:
        """Single-select picker; None when cancelled or empty."""
        ...

    def open_url(self, url: str) -> None: ...


class StatusIndicator(Protocol):
    """Pull request indicator; `update()` without a value recomputes it."""

    async def update(self, has_open_pr: bool | None = None) -> None: ...


class RepositoryCheckout(Protocol):
    async def checkout(self, repo_root: Path, ref: str) -> None: ...


__all__ = ["EditorHost", "PickItem", "RepositoryCheckout", "StatusIndicator"]
