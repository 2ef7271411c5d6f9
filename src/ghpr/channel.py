"""Append-only output channel shown to the user."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from ghpr.debug_log import log
from ghpr.limits import MAX_OUTPUT_LINES

if TYPE_CHECKING:
    from collections.abc import Callable


class OutputChannel:
    """Named, append-only text log (the "github" channel).

    Lines are kept in a bounded buffer and pushed to listeners as they arrive.
    Every line is mirrored into the debug log.
    """

    def __init__(self, name: str, *, max_lines: int = MAX_OUTPUT_LINES) -> None:
        self.name = name
        self._lines: deque[str] = deque(maxlen=max_lines)
        self._listeners: list[Callable[[str], None]] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def append_line(self, text: str) -> None:
        self._lines.append(text)
        log.info(f"[{self.name}] {text}")
        for listener in list(self._listeners):
            listener(text)

    def subscribe(self, listener: Callable[[str], None]) -> Callable[[], None]:
        """Register a listener for new lines; returns an unsubscribe callback."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


__all__ = ["OutputChannel"]
