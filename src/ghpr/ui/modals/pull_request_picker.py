"""Single-select picker over pull requests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from ghpr.commands.host import PickItem
from ghpr.ui.keybindings import PICKER_BINDINGS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textual.app import ComposeResult


class PullRequestPickerModal(ModalScreen[PickItem[Any] | None]):
    """Pick one item; Escape (or an empty list) resolves to None."""

    BINDINGS = PICKER_BINDINGS

    def __init__(self, items: Sequence[PickItem[Any]], **kwargs) -> None:
        super().__init__(**kwargs)
        self._items = list(items)

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-container"):
            yield Label("Select a pull request", classes="modal-title")
            options = [
                Option(Text.assemble(item.label, "  ", (item.description, "dim")), id=str(index))
                for index, item in enumerate(self._items)
            ]
            yield OptionList(*options, id="picker-options")
            if not self._items:
                yield Label("No open pull requests", id="picker-empty", classes="modal-hint")

    def on_mount(self) -> None:
        self.query_one("#picker-options", OptionList).focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if event.option.id is not None:
            self.dismiss(self._items[int(event.option.id)])

    def action_cancel(self) -> None:
        self.dismiss(None)
