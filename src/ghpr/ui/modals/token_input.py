"""Masked input modal for the personal access token."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label

from ghpr.ui.keybindings import TOKEN_INPUT_BINDINGS

if TYPE_CHECKING:
    from textual.app import ComposeResult


class TokenInputModal(ModalScreen[str | None]):
    """Prompt for a secret. Enter submits (empty allowed), Escape cancels.

    Clicking outside does not dismiss the prompt.
    """

    BINDINGS = TOKEN_INPUT_BINDINGS

    def __init__(self, placeholder: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical(id="token-modal-container"):
            yield Label(self._placeholder, classes="modal-title")
            yield Input(placeholder=self._placeholder, password=True, id="token-input")
            yield Label("Enter to save, Escape to cancel", classes="modal-hint")

    def on_mount(self) -> None:
        self.query_one("#token-input", Input).focus()

    @on(Input.Submitted, "#token-input")
    def on_token_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
