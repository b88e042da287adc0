"""DirectoryController: owns the store and view state, runs user commands."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Protocol

from model import FormMode, FormState, SortColumn, UserDraft, UserRecord, ViewState
from projection import Projection, project
from store import DuplicateIdError, NotFoundError, UserStore, ValidationError

log = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete {name}?"


class DirectorySurface(Protocol):
    """What the controller needs from whatever draws the directory."""

    def render_projection(self, projection: Projection, view: ViewState) -> None:
        """Show the visible rows, header sort glyphs and page info."""

    def show_notice(self, message: str, error: bool = False) -> None:
        """Show a success or error message."""

    def confirm(self, message: str, on_result: Callable[[bool], None]) -> None:
        """Ask a yes/no question; call on_result with the answer."""

    def open_form(self, title: str, draft: UserDraft) -> None:
        """Show the add/edit form pre-filled with draft."""

    def close_form(self) -> None:
        """Hide the add/edit form."""

    def mark_invalid(self, fields: list[str]) -> None:
        """Highlight form fields that need a value."""


class DirectoryController:
    """Runs directory commands against the store and re-renders the surface.

    All commands run to completion on the UI thread. The only background work
    is the initial fetch; while it is in flight (begin_load .. finish_load /
    fail_load) commands that change the store are refused.

    Errors raised by the store (ValidationError, NotFoundError) are handled
    here and turned into notices, so no command ever raises into the UI.
    """

    def __init__(
        self,
        surface: DirectorySurface,
        store: UserStore | None = None,
        view: ViewState | None = None,
    ) -> None:
        self.surface = surface
        self.store = store if store is not None else UserStore()
        self.view = view if view is not None else ViewState()
        self.form = FormState()
        self.loading = False
        self.projection: Projection | None = None

    # =========================================================================
    # Projection
    # =========================================================================

    def refresh(self) -> Projection:
        """Recompute the visible page and render it."""
        projection = project(self.store.records, self.view)
        # Keep the view state valid after deletes or a shrinking search
        self.view.current_page = projection.page
        self.projection = projection
        self.surface.render_projection(projection, self.view)
        return projection

    # =========================================================================
    # Loading
    # =========================================================================

    def begin_load(self) -> bool:
        """Mark a fetch as in flight. Returns False if one already is."""
        if self.loading:
            return False
        self.loading = True
        return True

    def finish_load(self, records: Iterable[UserRecord]) -> None:
        """Replace the store with freshly fetched records and go to page 1."""
        try:
            self.store.replace(records)
        except DuplicateIdError as e:
            self.fail_load(e)
            return
        self.loading = False
        self.view.current_page = 1
        if self.form.is_open:
            # Edit targets may no longer exist after a reload
            self.cancel_form()
        self.refresh()
        self.surface.show_notice(f"Loaded {len(self.store)} users")

    def fail_load(self, error: Exception) -> None:
        """Keep whatever the store held and tell the user."""
        self.loading = False
        log.error(f"Load failed: {error}")
        self.refresh()
        self.surface.show_notice(
            f"Failed to load users. Please check your internet connection. ({error})",
            error=True,
        )

    def _refuse_while_loading(self) -> bool:
        if self.loading:
            self.surface.show_notice("Users are still loading, try again in a moment", error=True)
            return True
        return False

    # =========================================================================
    # Search, sort, pagination
    # =========================================================================

    def search(self, term: str) -> Projection:
        """Filter by term; results start again at page 1."""
        self.view.search_term = term
        self.view.current_page = 1
        return self.refresh()

    def sort_by(self, column: SortColumn) -> Projection:
        """Sort by column, toggling direction if it is already active."""
        self.view.select_sort(column)
        log.debug(f"Sort by {column.value} {self.view.sort_direction.value}")
        return self.refresh()

    def go_to_page(self, page: int) -> Projection:
        """Jump to a page; out-of-range values are clamped."""
        self.view.current_page = page
        return self.refresh()

    def next_page(self) -> Projection:
        return self.go_to_page(self.view.current_page + 1)

    def previous_page(self) -> Projection:
        return self.go_to_page(self.view.current_page - 1)

    def set_rows_per_page(self, rows: int) -> Projection:
        """Change the page size and go back to page 1."""
        if rows <= 0:
            self.surface.show_notice(f"Rows per page must be positive (got {rows})", error=True)
            return self.refresh()
        self.view.rows_per_page = rows
        self.view.current_page = 1
        return self.refresh()

    # =========================================================================
    # Add / edit form
    # =========================================================================

    def start_add(self) -> None:
        """Open an empty form for a new user."""
        if self._refuse_while_loading():
            return
        self.form.start_add()
        self.surface.open_form(self.form.title, UserDraft())

    def start_edit(self, user_id: int) -> None:
        """Open the form pre-filled with an existing user."""
        if self._refuse_while_loading():
            return
        try:
            record = self.store.get(user_id)
        except NotFoundError as e:
            self.surface.show_notice(str(e), error=True)
            return
        self.form.start_edit(user_id)
        self.surface.open_form(self.form.title, UserDraft.from_record(record))

    def cancel_form(self) -> None:
        self.form.reset()
        self.surface.close_form()

    def submit_form(self, draft: UserDraft) -> UserRecord | None:
        """Save the form.

        On success the form closes and the saved record is returned. On a
        validation failure the form stays open with the missing fields marked.
        """
        if not self.form.is_open:
            log.debug("Submit ignored: no form open")
            return None
        if self._refuse_while_loading():
            return None

        try:
            if self.form.mode == FormMode.EDITING and self.form.target_id is not None:
                record = self.store.update(self.form.target_id, draft)
                message = "User updated successfully!"
            else:
                record = self.store.add(draft)
                message = "User added successfully!"
        except ValidationError as e:
            self.surface.mark_invalid(e.missing)
            self.surface.show_notice(str(e), error=True)
            return None
        except NotFoundError as e:
            # Target was deleted while its form was open
            self.cancel_form()
            self.refresh()
            self.surface.show_notice(str(e), error=True)
            return None

        self.cancel_form()
        self.refresh()
        self.surface.show_notice(message)
        return record

    # =========================================================================
    # Delete
    # =========================================================================

    def request_delete(self, user_id: int) -> None:
        """Ask for confirmation, then delete."""
        if self._refuse_while_loading():
            return
        try:
            record = self.store.get(user_id)
        except NotFoundError as e:
            self.surface.show_notice(str(e), error=True)
            return

        def on_result(confirmed: bool) -> None:
            if not confirmed:
                log.debug(f"Delete of {user_id} declined")
                return
            # A reload may have started while the prompt was open
            if self._refuse_while_loading():
                return
            self.delete(user_id)

        self.surface.confirm(DELETE_PROMPT.format(name=record.full_name or f"user {user_id}"), on_result)

    def delete(self, user_id: int) -> bool:
        """Delete without asking. Returns True if a record was removed."""
        try:
            self.store.remove(user_id)
        except NotFoundError as e:
            self.surface.show_notice(str(e), error=True)
            return False
        if self.form.mode == FormMode.EDITING and self.form.target_id == user_id:
            self.cancel_form()
        self.refresh()
        self.surface.show_notice("User deleted successfully!")
        return True
