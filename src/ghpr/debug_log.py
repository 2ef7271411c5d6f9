"""Diagnostic log behind the F12 viewer.

Two producers feed one bounded buffer: the `log` helper used throughout ghpr,
and stdlib `logging` records captured by `BufferHandler` once
`capture_logging()` has run.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ghpr.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from collections.abc import Iterator

TRUNCATION_SUFFIX = "... [truncated]"


class LogSource(StrEnum):
    APP = "GH"
    STDLIB = "PY"


@dataclass(frozen=True, slots=True)
class LogEntry:
    level: str
    message: str
    timestamp: float
    source: LogSource

    def render(self, time_format: str = "%Y-%m-%d %H:%M:%S") -> str:
        stamp = datetime.fromtimestamp(self.timestamp).strftime(time_format)
        return f"{stamp} [{self.source}] [{self.level}] {self.message}"


class LogBuffer:
    """Ring buffer of log entries.

    Positions are absolute: `total_appended` counts every entry ever appended
    and never goes back, so a viewer that remembers it can ask for what came
    after even once old entries have been dropped. `generation` increases on
    every clear so viewers can tell a reset buffer apart from one that merely
    stopped growing.
    """

    def __init__(self, max_entries: int = MAX_LOG_LINES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        self.generation = 0
        self.total_appended = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    @property
    def first_position(self) -> int:
        """Absolute position of the oldest entry still held."""
        return self.total_appended - len(self._entries)

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)
        self.total_appended += 1

    def since(self, position: int) -> list[LogEntry]:
        """Entries appended at or after absolute `position` that are still held."""
        skip = max(0, position - self.first_position)
        return list(self._entries)[skip:]

    def clear(self) -> None:
        self._entries.clear()
        self.generation += 1

    def export(self, path: str | Path) -> int:
        """Write every entry to `path`; returns the number of entries written."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        entries = list(self._entries)
        lines = [f"# ghpr debug log ({len(entries)} entries)"]
        lines.extend(entry.render() for entry in entries)
        target.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return len(entries)


log_buffer = LogBuffer()


def format_message(args: tuple[object, ...], fields: dict[str, Any]) -> str:
    """Join positional parts and key=value fields, capped at MAX_LOG_MESSAGE_LENGTH."""
    parts = [str(arg) for arg in args]
    parts.extend(f"{key}={value!r}" for key, value in fields.items())
    message = " ".join(parts)
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        message = message[:MAX_LOG_MESSAGE_LENGTH] + TRUNCATION_SUFFIX
    return message


class GhprLogger:
    """`log.info("Checked out", ref=ref)` style logger writing to a LogBuffer."""

    def __init__(self, buffer: LogBuffer | None = None) -> None:
        self._buffer = buffer if buffer is not None else log_buffer

    def _record(self, level: str, args: tuple[object, ...], fields: dict[str, Any]) -> None:
        self._buffer.append(
            LogEntry(
                level=level,
                message=format_message(args, fields),
                timestamp=time.time(),
                source=LogSource.APP,
            )
        )

    def __call__(self, *args: object, **fields: Any) -> None:
        self._record("INFO", args, fields)

    def debug(self, *args: object, **fields: Any) -> None:
        self._record("DEBUG", args, fields)

    def info(self, *args: object, **fields: Any) -> None:
        self._record("INFO", args, fields)

    def warning(self, *args: object, **fields: Any) -> None:
        self._record("WARNING", args, fields)

    def error(self, *args: object, **fields: Any) -> None:
        self._record("ERROR", args, fields)


class BufferHandler(logging.Handler):
    """Copies stdlib logging records into a LogBuffer."""

    def __init__(self, buffer: LogBuffer | None = None) -> None:
        super().__init__()
        self._buffer = buffer if buffer is not None else log_buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self._buffer.append(
            LogEntry(
                level=record.levelname,
                message=message,
                timestamp=record.created,
                source=LogSource.STDLIB,
            )
        )


_handler: BufferHandler | None = None


def capture_logging(level: int = logging.INFO) -> BufferHandler:
    """Route stdlib logging into the shared buffer. Safe to call repeatedly."""
    global _handler

    if _handler is not None:
        return _handler

    _handler = BufferHandler()
    _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root = logging.getLogger()
    root.addHandler(_handler)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)
    log.debug("Capturing stdlib logging", level=logging.getLevelName(level))
    return _handler


log = GhprLogger()

__all__ = [
    "BufferHandler",
    "GhprLogger",
    "LogBuffer",
    "LogEntry",
    "LogSource",
    "capture_logging",
    "format_message",
    "log",
    "log_buffer",
]
