"""Modal dialogs for userdir."""

from __future__ import annotations

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from ui.ids import css
import ui.ids as ids


class ConfirmModal(ModalScreen[bool]):
    """Yes/no confirmation. Dismisses with True only on an explicit yes."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("n", "cancel", "No"),
        ("y", "confirm", "Yes"),
    ]

    def __init__(self, message: str, title: str = "Confirm") -> None:
        super().__init__()
        self.message = message
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.CONFIRM_DIALOG):
            yield Label(self.title_text, id=ids.MODAL_TITLE)
            yield Static(Text(self.message), id=ids.CONFIRM_MESSAGE)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel (n)", id=ids.CONFIRM_NO_BTN, variant="default")
                yield Button("Delete (y)", id=ids.CONFIRM_YES_BTN, variant="error")

    def on_mount(self) -> None:
        # Safe default: Enter on open cancels
        self.query_one(css(ids.CONFIRM_NO_BTN), Button).focus()

    def action_cancel(self) -> None:
        self.dismiss(False)

    def action_confirm(self) -> None:
        self.dismiss(True)

    @on(Button.Pressed, css(ids.CONFIRM_NO_BTN))
    def on_no(self, event: Button.Pressed) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CONFIRM_YES_BTN))
    def on_yes(self, event: Button.Pressed) -> None:
        self.dismiss(True)
