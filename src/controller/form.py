"""Add/edit form event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual import on
from textual.css.query import NoMatches
from textual.widgets import Button, Input

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.directory import DirectoryController

log = logging.getLogger(__name__)


class FormEventsMixin:
    """Mixin for the add/edit user form."""

    directory: DirectoryController
    query_one: Callable

    @on(Button.Pressed, css(ids.ADD_USER_BTN))
    def on_add_user_pressed(self, event: Button.Pressed) -> None:
        self.action_add_user()

    @on(Button.Pressed, css(ids.SAVE_USER_BTN))
    def on_save_user_pressed(self, event: Button.Pressed) -> None:
        self._submit_user_form()

    @on(Button.Pressed, css(ids.CANCEL_FORM_BTN))
    def on_cancel_form_pressed(self, event: Button.Pressed) -> None:
        self.action_cancel_form()

    @on(Input.Submitted)
    def on_form_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any form field submits the form."""
        if event.input.id not in ids.FORM_INPUTS.values():
            return
        self._submit_user_form()

    def action_add_user(self) -> None:
        """Open an empty form."""
        self.directory.start_add()

    def action_cancel_form(self) -> None:
        """Close the form without saving."""
        if self.directory.form.is_open:
            self.directory.cancel_form()

    def _submit_user_form(self) -> None:
        """Read the form inputs and hand them to the controller."""
        from ui import UserForm

        try:
            form = self.query_one(css(ids.USER_FORM_SECTION), UserForm)
        except NoMatches:
            log.debug("User form not found")
            return
        self.directory.submit_form(form.read_draft())
