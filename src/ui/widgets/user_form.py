"""Add/edit form widget: UserForm."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label

from form_validators import FIELD_LABELS
from model import UserDraft
from ui.ids import css
import ui.ids as ids


class UserForm(Vertical):
    """Inline form for adding or editing a user. Hidden while idle."""

    def compose(self) -> ComposeResult:
        yield Label("Add User", id=ids.FORM_TITLE)
        for name, input_id in ids.FORM_INPUTS.items():
            with Horizontal(classes="form-row"):
                yield Label(FIELD_LABELS[name], classes="form-label")
                yield Input(placeholder=FIELD_LABELS[name], id=input_id)
        with Horizontal(id="form-buttons"):
            yield Button("Save", id=ids.SAVE_USER_BTN, variant="success")
            yield Button("Cancel", id=ids.CANCEL_FORM_BTN, variant="default")

    def _input(self, name: str) -> Input:
        return self.query_one(css(ids.FORM_INPUTS[name]), Input)

    def open(self, title: str, draft: UserDraft) -> None:
        """Show the form with a title and pre-filled values."""
        self.query_one(css(ids.FORM_TITLE), Label).update(title)
        for name in UserDraft.FIELDS:
            self._input(name).value = getattr(draft, name)
        self.clear_invalid()
        self.remove_class("hidden")
        self._input(UserDraft.FIELDS[0]).focus()

    def close(self) -> None:
        """Clear and hide the form."""
        for name in UserDraft.FIELDS:
            self._input(name).value = ""
        self.clear_invalid()
        self.add_class("hidden")

    def read_draft(self) -> UserDraft:
        """Current input values as a draft (not yet trimmed)."""
        return UserDraft(**{name: self._input(name).value for name in UserDraft.FIELDS})

    def mark_invalid(self, fields: list[str]) -> None:
        """Highlight the inputs that need a value and focus the first one."""
        self.clear_invalid()
        for name in fields:
            self._input(name).add_class("missing")
        if fields:
            self._input(fields[0]).focus()

    def clear_invalid(self) -> None:
        for name in UserDraft.FIELDS:
            self._input(name).remove_class("missing")
