"""Main TUI application for userdir."""

import logging
import os
from pathlib import Path
from typing import Callable

from rich.markup import escape
from rich.text import Text
from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Button, DataTable, Input, Label, Select, Static

from config import DirectoryConfig
from controller import (
    DirectoryController,
    FormEventsMixin,
    PaginationEventsMixin,
    RowActionEventsMixin,
    SearchEventsMixin,
    SortEventsMixin,
)
from loader import FetchError, load_users
from model import UserDraft, UserRecord, ViewState
from projection import Projection
from ui import ConfirmModal, PaginationBar, UserForm, UserTable
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "userdir"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "userdir.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class UserDirectoryApp(
    SearchEventsMixin,
    SortEventsMixin,
    PaginationEventsMixin,
    FormEventsMixin,
    RowActionEventsMixin,
    App,
):
    """TUI for browsing and editing the user directory.

    The app is the render surface for DirectoryController: the controller
    decides what is visible and calls back into render_projection,
    show_notice, confirm, open_form, close_form and mark_invalid.
    """

    TITLE = "User Directory"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("a", "add_user", "Add", show=True),
        Binding("e", "edit_selected", "Edit", show=True),
        Binding("d", "delete_selected", "Delete", show=True),
        Binding("r", "reload", "Reload", show=True),
        Binding("/", "focus_search", "Search", show=True),
        Binding("left_square_bracket", "previous_page", "Prev Page"),
        Binding("right_square_bracket", "next_page", "Next Page"),
        Binding("escape", "cancel_form", "Cancel"),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: DirectoryConfig | None = None,
        fetch: Callable[[], list[UserRecord]] | None = None,
        view: ViewState | None = None,
    ) -> None:
        super().__init__()
        self.directory_config = config or DirectoryConfig()
        self._fetch = fetch or (lambda: load_users(self.directory_config))
        if view is None:
            view = ViewState(rows_per_page=self.directory_config.page_size)
        self.directory = DirectoryController(self, view=view)

    def compose(self) -> ComposeResult:
        log.info("compose() called")

        yield Horizontal(
            Label("User Directory", id=ids.HEADER_TITLE),
            Input(placeholder="Search by name, email or department...", id=ids.SEARCH_INPUT),
            Button("Add User (a)", id=ids.ADD_USER_BTN, variant="primary"),
            Button("Reload (r)", id=ids.RELOAD_BTN, variant="default"),
            id=ids.HEADER_CONTAINER,
        )

        with Vertical(id=ids.MAIN_CONTENT):
            yield UserTable(id=ids.USER_TABLE)
            yield Static("No users to show", id=ids.EMPTY_HINT, classes="hidden")
            yield Horizontal(
                Button("Edit (e)", id=ids.EDIT_USER_BTN, variant="default"),
                Button("Delete (d)", id=ids.DELETE_USER_BTN, variant="error"),
                id=ids.ROW_ACTIONS,
            )
            yield PaginationBar(page_size=self.directory.view.rows_per_page, id=ids.PAGINATION_BAR)

        yield UserForm(id=ids.USER_FORM_SECTION, classes="hidden")

        yield Horizontal(
            Static("", id=ids.STATUS_BAR),
            id=ids.FOOTER_BAR,
        )

    # =========================================================================
    # Status
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(Text(message))
        except NoMatches:
            pass

    # =========================================================================
    # Render surface (called by DirectoryController)
    # =========================================================================

    def render_projection(self, projection: Projection, view: ViewState) -> None:
        """Redraw the table, empty hint and pagination footer."""
        try:
            self.query_one(css(ids.USER_TABLE), UserTable).show_projection(projection, view)
            self.query_one(css(ids.PAGINATION_BAR), PaginationBar).show(projection)
            hint = self.query_one(css(ids.EMPTY_HINT), Static)
            if projection.rows:
                hint.add_class("hidden")
            else:
                hint.update("No matching users" if view.search_term else "No users to show")
                hint.remove_class("hidden")
        except NoMatches:
            log.debug("Table widgets not mounted yet")

    def show_notice(self, message: str, error: bool = False) -> None:
        """Toast plus status bar."""
        if error:
            log.warning(message)
        else:
            log.info(message)
        self.notify(escape(message), severity="error" if error else "information")
        self._set_status(message)

    def confirm(self, message: str, on_result: Callable[[bool], None]) -> None:
        """Ask via ConfirmModal; closing the modal any other way means no."""
        self.push_screen(ConfirmModal(message, title="Delete User"), lambda result: on_result(bool(result)))

    def open_form(self, title: str, draft: UserDraft) -> None:
        try:
            self.query_one(css(ids.USER_FORM_SECTION), UserForm).open(title, draft)
        except NoMatches:
            log.debug("User form not found")

    def close_form(self) -> None:
        try:
            self.query_one(css(ids.USER_FORM_SECTION), UserForm).close()
        except NoMatches:
            log.debug("User form not found")

    def mark_invalid(self, fields: list[str]) -> None:
        try:
            self.query_one(css(ids.USER_FORM_SECTION), UserForm).mark_invalid(fields)
        except NoMatches:
            log.debug("User form not found")

    # =========================================================================
    # Loading
    # =========================================================================

    def action_reload(self) -> None:
        """Fetch users again, replacing the local list (and any local edits)."""
        if not self.directory.begin_load():
            self._set_status("Already loading...")
            return
        self._set_status(f"Loading users from {self.directory_config.source}...")
        self._load_users()

    @work(thread=True, exclusive=True, group="load")
    def _load_users(self) -> None:
        """Run the blocking fetch off the UI thread; apply the result on it."""
        try:
            records = self._fetch()
        except FetchError as e:
            self.call_from_thread(self.directory.fail_load, e)
            return
        self.call_from_thread(self.directory.finish_load, records)

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    # Search handlers (from SearchEventsMixin)
    @on(Input.Changed, css(ids.SEARCH_INPUT))
    def _on_search_input_changed(self, event: Input.Changed) -> None:
        """Forward to mixin handler."""
        self.on_search_changed(event)

    # Sort handlers (from SortEventsMixin)
    @on(DataTable.HeaderSelected, css(ids.USER_TABLE))
    def _on_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Forward to mixin handler."""
        self.on_header_selected(event)

    # Row action handlers (from RowActionEventsMixin)
    @on(DataTable.RowSelected, css(ids.USER_TABLE))
    def _on_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Forward to mixin handler."""
        self.on_row_chosen(event)

    @on(Button.Pressed, css(ids.EDIT_USER_BTN))
    def _on_edit_user_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_edit_user_pressed(event)

    @on(Button.Pressed, css(ids.DELETE_USER_BTN))
    def _on_delete_user_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_delete_user_pressed(event)

    # Pagination handlers (from PaginationEventsMixin)
    @on(Button.Pressed, css(ids.PREV_PAGE_BTN))
    def _on_prev_page_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_prev_page_pressed(event)

    @on(Button.Pressed, css(ids.NEXT_PAGE_BTN))
    def _on_next_page_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_next_page_pressed(event)

    @on(Select.Changed, css(ids.ROWS_PER_PAGE))
    def _on_rows_per_page_select(self, event: Select.Changed) -> None:
        """Forward to mixin handler."""
        self.on_rows_per_page_changed(event)

    # Form handlers (from FormEventsMixin)
    @on(Button.Pressed, css(ids.ADD_USER_BTN))
    def _on_add_user_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_add_user_pressed(event)

    @on(Button.Pressed, css(ids.SAVE_USER_BTN))
    def _on_save_user_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_save_user_pressed(event)

    @on(Button.Pressed, css(ids.CANCEL_FORM_BTN))
    def _on_cancel_form_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_cancel_form_pressed(event)

    @on(Input.Submitted)
    def _on_form_input_submitted(self, event: Input.Submitted) -> None:
        """Forward to mixin handler."""
        self.on_form_input_submitted(event)

    @on(Button.Pressed, css(ids.RELOAD_BTN))
    def _on_reload_btn(self, event: Button.Pressed) -> None:
        self.action_reload()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        self.directory.refresh()
        self.action_reload()
        self.query_one(css(ids.USER_TABLE), UserTable).focus()
