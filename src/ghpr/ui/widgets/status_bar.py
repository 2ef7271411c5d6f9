"""Status bar widget for connection and pull request state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual.app import ComposeResult

    from ghpr.status import PullRequestStatus

PR_OPEN_ICON = "●"
PR_NONE_ICON = "○"
PR_UNKNOWN_ICON = "?"


def format_pull_request_status(connected: bool, has_open_pr: bool | None) -> str:
    if not connected:
        return "GitHub: not connected (press t to set a token)"
    if has_open_pr is None:
        return f"{PR_UNKNOWN_ICON} Pull request status unknown"
    if has_open_pr:
        return f"{PR_OPEN_ICON} Pull request open"
    return f"{PR_NONE_ICON} No pull request (press c to create)"


class PullRequestStatusBar(Widget):
    """Mirrors a `PullRequestStatus`; re-renders on every update."""

    connected: reactive[bool] = reactive(False)
    has_open_pr: reactive[bool | None] = reactive(None)

    def __init__(self, **kwargs) -> None:
        if "id" not in kwargs:
            kwargs["id"] = "pr-status-bar"
        super().__init__(**kwargs)
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="pr-status-text")

    def on_mount(self) -> None:
        self._update_display()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def attach(self, status: PullRequestStatus) -> None:
        """Follow a status object from now on."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = status.subscribe(self._on_status_changed)
        self._on_status_changed(status)

    def _on_status_changed(self, status: PullRequestStatus) -> None:
        self.connected = status.connected
        self.has_open_pr = status.has_open_pr

    def watch_connected(self, _connected: bool) -> None:
        self._update_display()

    def watch_has_open_pr(self, _has_open_pr: bool | None) -> None:
        self._update_display()

    def _update_display(self) -> None:
        if not self.is_mounted:
            return
        text = format_pull_request_status(self.connected, self.has_open_pr)
        self.query_one("#pr-status-text", Static).update(text)
        self.set_class(self.has_open_pr is True, "-pr-open")
