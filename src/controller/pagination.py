"""Pagination event handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.widgets import Button, Select

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.directory import DirectoryController


class PaginationEventsMixin:
    """Mixin for Prev/Next and the rows-per-page selector."""

    directory: DirectoryController

    @on(Button.Pressed, css(ids.PREV_PAGE_BTN))
    def on_prev_page_pressed(self, event: Button.Pressed) -> None:
        self.action_previous_page()

    @on(Button.Pressed, css(ids.NEXT_PAGE_BTN))
    def on_next_page_pressed(self, event: Button.Pressed) -> None:
        self.action_next_page()

    @on(Select.Changed, css(ids.ROWS_PER_PAGE))
    def on_rows_per_page_changed(self, event: Select.Changed) -> None:
        """Apply a new page size; the table goes back to page 1."""
        if not isinstance(event.value, int):
            return
        # Select posts Changed on mount too; ignore a no-op
        if event.value == self.directory.view.rows_per_page:
            return
        self.directory.set_rows_per_page(event.value)

    def action_previous_page(self) -> None:
        self.directory.previous_page()

    def action_next_page(self) -> None:
        self.directory.next_page()
