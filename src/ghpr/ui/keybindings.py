"""Keybindings for the ghpr TUI application."""

from __future__ import annotations

from textual.binding import Binding, BindingType

from ghpr.commands.registry import COMMANDS

# =============================================================================
# App Bindings
# =============================================================================

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    *(
        Binding(spec.key, f"run_command('{spec.command_id}')", spec.title.removeprefix("GitHub: "))
        for spec in COMMANDS
    ),
    Binding("ctrl+p", "command_palette", "Palette", show=False),
    Binding("f12", "toggle_debug_log", "Debug", show=False),
]

# =============================================================================
# Modal Bindings
# =============================================================================

TOKEN_INPUT_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Cancel"),
]

PICKER_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Cancel"),
]

DEBUG_LOG_BINDINGS: list[BindingType] = [
    Binding("escape", "close", "Close"),
    Binding("f12", "close", "Close", show=False),
    Binding("c", "clear_logs", "Clear"),
    Binding("s", "save_logs", "Save"),
]
