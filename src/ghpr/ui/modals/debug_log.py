"""F12 viewer for the diagnostic log buffer."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Label, RichLog, Rule

from ghpr.debug_log import LogEntry, LogSource, log_buffer
from ghpr.paths import get_debug_log_path
from ghpr.ui.keybindings import DEBUG_LOG_BINDINGS

if TYPE_CHECKING:
    from textual.app import ComposeResult

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


def format_entry(entry: LogEntry) -> str:
    style = _LEVEL_STYLES.get(entry.level, "white")
    origin = " \\[PY]" if entry.source is LogSource.STDLIB else ""
    stamp = datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S")
    return f"[{style}]{stamp} \\[{entry.level}]{origin}[/{style}] {escape(entry.message)}"


class DebugLogModal(ModalScreen[None]):
    """Live tail of the debug log buffer."""

    BINDINGS = DEBUG_LOG_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self._shown = 0
        self._generation = log_buffer.generation

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container"):
            yield Label("Debug Log", classes="modal-title")
            yield Label("[dim]c clear | s save | Esc close[/dim]", classes="modal-hint")
            yield Rule()
            yield RichLog(id="debug-log", highlight=True, markup=True, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self._sync()
        self.set_interval(0.5, self._sync)

    def _sync(self) -> None:
        view = self.query_one("#debug-log", RichLog)
        if log_buffer.generation != self._generation:
            self._generation = log_buffer.generation
            view.clear()
        missed = log_buffer.first_position - self._shown
        if missed > 0:
            view.write(f"[dim]... {missed} older entries dropped[/dim]")
        for entry in log_buffer.since(self._shown):
            view.write(format_entry(entry))
        self._shown = log_buffer.total_appended

    def action_close(self) -> None:
        self.dismiss(None)

    def action_clear_logs(self) -> None:
        log_buffer.clear()
        self._sync()
        self.query_one("#debug-log", RichLog).write("[dim]Log cleared[/dim]")

    def action_save_logs(self) -> None:
        view = self.query_one("#debug-log", RichLog)
        path = get_debug_log_path()
        try:
            count = log_buffer.export(path)
        except OSError as exc:
            view.write(f"[red]Could not save log: {exc}[/red]")
            return
        view.write(f"[green]Saved {count} entries to {path}[/green]")
