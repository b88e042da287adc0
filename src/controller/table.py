"""Table event handlers: header sorting and row actions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual import on
from textual.css.query import NoMatches
from textual.widgets import Button, DataTable

from model import SortColumn
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.directory import DirectoryController

log = logging.getLogger(__name__)


class SortEventsMixin:
    """Mixin for sortable column headers."""

    directory: DirectoryController

    @on(DataTable.HeaderSelected, css(ids.USER_TABLE))
    def on_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Sort by the clicked column; clicking it again flips the direction."""
        try:
            column = SortColumn(event.column_key.value)
        except ValueError:
            # Actions column
            return
        self.directory.sort_by(column)


class RowActionEventsMixin:
    """Mixin for edit/delete on the highlighted row."""

    directory: DirectoryController
    query_one: Callable
    _set_status: Callable

    def _selected_user_id(self) -> int | None:
        """Id of the highlighted table row, if any."""
        from ui import UserTable

        try:
            return self.query_one(css(ids.USER_TABLE), UserTable).selected_user_id
        except NoMatches:
            log.debug("User table not found")
            return None

    @on(Button.Pressed, css(ids.EDIT_USER_BTN))
    def on_edit_user_pressed(self, event: Button.Pressed) -> None:
        self.action_edit_selected()

    @on(Button.Pressed, css(ids.DELETE_USER_BTN))
    def on_delete_user_pressed(self, event: Button.Pressed) -> None:
        self.action_delete_selected()

    @on(DataTable.RowSelected, css(ids.USER_TABLE))
    def on_row_chosen(self, event: DataTable.RowSelected) -> None:
        """Enter on a row opens it for editing."""
        if event.row_key.value is not None:
            self.directory.start_edit(int(event.row_key.value))

    def action_edit_selected(self) -> None:
        """Open the highlighted user in the edit form."""
        user_id = self._selected_user_id()
        if user_id is None:
            self._set_status("No user selected")
            return
        self.directory.start_edit(user_id)

    def action_delete_selected(self) -> None:
        """Delete the highlighted user after confirmation."""
        user_id = self._selected_user_id()
        if user_id is None:
            self._set_status("No user selected")
            return
        self.directory.request_delete(user_id)
