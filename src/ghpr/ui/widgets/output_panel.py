"""Live view of the github output channel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import RichLog

if TYPE_CHECKING:
    from collections.abc import Callable

    from ghpr.channel import OutputChannel


class OutputPanel(RichLog):
    """Shows existing channel lines, then appends new ones as they arrive."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("id", "output-panel")
        kwargs.setdefault("wrap", True)
        kwargs.setdefault("markup", False)
        super().__init__(**kwargs)
        self._unsubscribe: Callable[[], None] | None = None

    def attach(self, channel: OutputChannel) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.border_title = channel.name
        self.clear()
        for line in channel.lines:
            self.write(line)
        self._unsubscribe = channel.subscribe(self.write)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
