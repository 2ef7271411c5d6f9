"""Tests for the diagnostic log buffer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from ghpr.debug_log import (
    TRUNCATION_SUFFIX,
    BufferHandler,
    GhprLogger,
    LogBuffer,
    LogSource,
    capture_logging,
    log_buffer,
)
from ghpr.limits import MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


@pytest.fixture
def buffer() -> LogBuffer:
    return LogBuffer(max_entries=5)


class TestGhprLogger:
    def test_fields_are_rendered_as_key_value(self, buffer: LogBuffer) -> None:
        GhprLogger(buffer).info("Checked out", ref="fix", number=7)

        assert buffer[0].message == "Checked out ref='fix' number=7"
        assert buffer[0].level == "INFO"
        assert buffer[0].source is LogSource.APP

    def test_message_at_limit_is_kept(self, buffer: LogBuffer) -> None:
        GhprLogger(buffer).warning("y" * MAX_LOG_MESSAGE_LENGTH)

        assert buffer[0].message == "y" * MAX_LOG_MESSAGE_LENGTH

    def test_oversized_message_is_truncated(self, buffer: LogBuffer) -> None:
        GhprLogger(buffer).error("z" * (MAX_LOG_MESSAGE_LENGTH + 1))

        message = buffer[0].message
        assert message.endswith(TRUNCATION_SUFFIX)
        assert len(message) == MAX_LOG_MESSAGE_LENGTH + len(TRUNCATION_SUFFIX)

    def test_calling_logger_logs_info(self, buffer: LogBuffer) -> None:
        GhprLogger(buffer)("hello")

        assert buffer[0].level == "INFO"


class TestLogBuffer:
    def test_oldest_entries_are_dropped(self, buffer: LogBuffer) -> None:
        logger = GhprLogger(buffer)
        for index in range(7):
            logger.info(f"entry {index}")

        assert [entry.message for entry in buffer] == [f"entry {i}" for i in range(2, 7)]

    def test_clear_bumps_generation(self, buffer: LogBuffer) -> None:
        GhprLogger(buffer).info("x")
        generation = buffer.generation

        buffer.clear()

        assert len(buffer) == 0
        assert buffer.generation == generation + 1

    def test_since_returns_tail(self, buffer: LogBuffer) -> None:
        logger = GhprLogger(buffer)
        logger.info("a")
        logger.info("b")

        assert [entry.message for entry in buffer.since(1)] == ["b"]

    def test_since_keeps_returning_new_entries_once_full(self, buffer: LogBuffer) -> None:
        logger = GhprLogger(buffer)
        for index in range(5):
            logger.info(f"entry {index}")
        position = buffer.total_appended

        logger.info("GitHub response:", {"status": 404})

        assert [entry.message for entry in buffer.since(position)] == [
            "GitHub response: {'status': 404}"
        ]
        assert buffer.total_appended == 6
        assert buffer.first_position == 1

    def test_since_position_older_than_buffer_returns_everything_held(
        self, buffer: LogBuffer
    ) -> None:
        logger = GhprLogger(buffer)
        for index in range(8):
            logger.info(f"entry {index}")

        assert [entry.message for entry in buffer.since(0)] == [
            f"entry {i}" for i in range(3, 8)
        ]
        assert [entry.message for entry in buffer.since(6)] == ["entry 6", "entry 7"]

    def test_clear_keeps_positions_monotonic(self, buffer: LogBuffer) -> None:
        logger = GhprLogger(buffer)
        logger.info("before")
        position = buffer.total_appended

        buffer.clear()
        logger.info("after")

        assert buffer.total_appended == 2
        assert [entry.message for entry in buffer.since(position)] == ["after"]

    def test_export_writes_every_entry(self, buffer: LogBuffer, tmp_path: Path) -> None:
        logger = GhprLogger(buffer)
        logger.info("first")
        logger.error("second")
        target = tmp_path / "logs" / "debug.log"

        count = buffer.export(target)

        lines = target.read_text().splitlines()
        assert count == 2
        assert lines[0] == "# ghpr debug log (2 entries)"
        assert lines[1].endswith("[GH] [INFO] first")
        assert lines[2].endswith("[GH] [ERROR] second")


class TestStdlibCapture:
    def test_handler_records_stdlib_messages(self, buffer: LogBuffer) -> None:
        handler = BufferHandler(buffer)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger = logging.getLogger("ghpr.tests.capture")
        logger.addHandler(handler)
        try:
            logger.error("GitHub response: %r", {"status": 404})
        finally:
            logger.removeHandler(handler)

        assert buffer[0].message == "ghpr.tests.capture: GitHub response: {'status': 404}"
        assert buffer[0].level == "ERROR"
        assert buffer[0].source is LogSource.STDLIB

    def test_capture_logging_is_idempotent(self) -> None:
        handler = capture_logging()

        assert capture_logging() is handler
        assert logging.getLogger().handlers.count(handler) == 1

    def test_captured_records_reach_shared_buffer(self) -> None:
        capture_logging()
        log_buffer.clear()

        logging.getLogger("ghpr.tests.shared").warning("remote rejected")

        assert any(
            entry.source is LogSource.STDLIB and entry.message.endswith("remote rejected")
            for entry in log_buffer
        )
