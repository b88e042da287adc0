"""Search event handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from textual import on
from textual.css.query import NoMatches
from textual.widgets import Input

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.directory import DirectoryController


class SearchEventsMixin:
    """Mixin for the search box."""

    # Expected from App class
    directory: DirectoryController
    query_one: Callable

    @on(Input.Changed, css(ids.SEARCH_INPUT))
    def on_search_changed(self, event: Input.Changed) -> None:
        """Filter the table as the user types."""
        self.directory.search(event.value)

    def action_focus_search(self) -> None:
        """Move focus to the search box."""
        try:
            self.query_one(css(ids.SEARCH_INPUT), Input).focus()
        except NoMatches:
            pass
