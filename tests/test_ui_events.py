"""Tests for UI event handling - verifies key presses, button clicks and inputs reach the controller.

These tests catch wiring problems where event decorators don't register properly.
"""

from types import SimpleNamespace

import pytest
from textual.widgets import Button, Input, Select, Static
from textual.widgets.data_table import ColumnKey

# Import from src modules
from app import UserDirectoryApp
from config import DirectoryConfig
from loader import FetchError
from model import SortColumn, SortDirection, UserRecord
from ui import ConfirmModal, UserForm, UserTable
import ui.ids as ids
from ui.ids import css

SIZE = (120, 40)


def _make_app(records, page_size=10):
    return UserDirectoryApp(DirectoryConfig(page_size=page_size), fetch=lambda: list(records))


async def _wait_loaded(pilot):
    """Let the fetch worker finish and its result be applied."""
    await pilot.app.workers.wait_for_complete()
    await pilot.pause()


def _fill_form(app, **values):
    for name, value in values.items():
        app.query_one(css(ids.FORM_INPUTS[name]), Input).value = value


class TestLoading:
    """Test the fetch on startup."""

    @pytest.mark.asyncio
    async def test_users_shown_after_load(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            table = app.query_one(css(ids.USER_TABLE), UserTable)
            assert table.row_count == 5
            assert not app.directory.loading
            assert app.query_one(css(ids.EMPTY_HINT), Static).has_class("hidden")

    @pytest.mark.asyncio
    async def test_fetch_failure_shows_empty_table(self):
        def failing_fetch():
            raise FetchError("http://api.test/users", "Connection refused")

        app = UserDirectoryApp(DirectoryConfig(), fetch=failing_fetch)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            assert app.query_one(css(ids.USER_TABLE), UserTable).row_count == 0
            assert not app.query_one(css(ids.EMPTY_HINT), Static).has_class("hidden")
            assert not app.directory.loading

    @pytest.mark.asyncio
    async def test_duplicate_ids_do_not_crash(self):
        records = [
            UserRecord(1, "Ada Lovelace", "a@x.io", "R"),
            UserRecord(1, "Bob Lee", "b@x.io", "M"),
        ]
        app = _make_app(records)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            assert app.is_running
            assert not app.directory.loading
            assert len(app.directory.store) == 0
            assert app.query_one(css(ids.USER_TABLE), UserTable).row_count == 0

    @pytest.mark.asyncio
    async def test_malformed_url_does_not_crash(self):
        app = UserDirectoryApp(DirectoryConfig(api_url="not-a-url"))
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            assert app.is_running
            assert not app.directory.loading
            assert not app.query_one(css(ids.EMPTY_HINT), Static).has_class("hidden")

    @pytest.mark.asyncio
    async def test_reload_button_refetches(self, users):
        calls = []

        def fetch():
            calls.append(1)
            return list(users)

        app = UserDirectoryApp(DirectoryConfig(), fetch=fetch)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.RELOAD_BTN), Button).press()
            await pilot.pause()
            await _wait_loaded(pilot)

            assert len(calls) == 2


class TestSearchEvents:
    """Test the search box."""

    @pytest.mark.asyncio
    async def test_typing_filters_table(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            app.query_one(css(ids.SEARCH_INPUT), Input).value = "romaguera"
            await pilot.pause()

            assert app.query_one(css(ids.USER_TABLE), UserTable).row_count == 2
            assert app.directory.view.search_term == "romaguera"

    @pytest.mark.asyncio
    async def test_slash_focuses_search(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            await pilot.press("/")
            await pilot.pause()

            assert app.focused is app.query_one(css(ids.SEARCH_INPUT), Input)


class TestSortEvents:
    """Test header sorting."""

    @pytest.mark.asyncio
    async def test_header_select_sorts_and_toggles(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            event = SimpleNamespace(column_key=ColumnKey(SortColumn.LAST_NAME.value))
            app.on_header_selected(event)
            await pilot.pause()
            assert app.directory.view.sort_column == SortColumn.LAST_NAME
            assert app.directory.projection.rows[0].id == 3

            app.on_header_selected(event)
            await pilot.pause()
            assert app.directory.view.sort_direction == SortDirection.DESC
            assert app.directory.projection.rows[0].id == 4

    @pytest.mark.asyncio
    async def test_actions_header_ignored(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            app.on_header_selected(SimpleNamespace(column_key=ColumnKey("actions")))
            await pilot.pause()
            assert app.directory.view.sort_column is None


class TestPaginationEvents:
    """Test Prev/Next and rows per page."""

    @pytest.fixture
    def many_users(self):
        return [UserRecord(i, f"First{i} Last{i}", f"u{i}@example.com", "Ops") for i in range(1, 13)]

    @pytest.mark.asyncio
    async def test_next_and_prev_buttons(self, many_users):
        app = _make_app(many_users, page_size=5)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            prev_btn = app.query_one(css(ids.PREV_PAGE_BTN), Button)
            assert prev_btn.disabled

            app.query_one(css(ids.NEXT_PAGE_BTN), Button).press()
            await pilot.pause()
            assert app.directory.view.current_page == 2
            assert app.directory.projection.page_label == "Page 2 of 3"
            assert not prev_btn.disabled

            prev_btn.press()
            await pilot.pause()
            assert app.directory.view.current_page == 1

    @pytest.mark.asyncio
    async def test_bracket_keys_page(self, many_users):
        app = _make_app(many_users, page_size=5)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)

            await pilot.press("right_square_bracket")
            await pilot.press("right_square_bracket")
            await pilot.press("right_square_bracket")
            await pilot.pause()
            assert app.directory.view.current_page == 3

            await pilot.press("left_square_bracket")
            await pilot.pause()
            assert app.directory.view.current_page == 2

    @pytest.mark.asyncio
    async def test_rows_per_page_select(self, many_users):
        app = _make_app(many_users, page_size=5)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.directory.go_to_page(3)

            app.query_one(css(ids.ROWS_PER_PAGE), Select).value = 25
            await pilot.pause()

            assert app.directory.view.rows_per_page == 25
            assert app.directory.view.current_page == 1
            assert app.query_one(css(ids.USER_TABLE), UserTable).row_count == 12


class TestFormEvents:
    """Test the add/edit form."""

    @pytest.mark.asyncio
    async def test_add_key_opens_form_and_save_adds(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            form = app.query_one(css(ids.USER_FORM_SECTION), UserForm)
            assert form.has_class("hidden")

            await pilot.press("a")
            await pilot.pause()
            assert not form.has_class("hidden")

            _fill_form(app, first_name="Ada", last_name="Lovelace", email="ada@example.com", department="Research")
            app.query_one(css(ids.SAVE_USER_BTN), Button).press()
            await pilot.pause()

            assert len(app.directory.store) == 6
            assert app.directory.store.get(6).full_name == "Ada Lovelace"
            assert form.has_class("hidden")

    @pytest.mark.asyncio
    async def test_enter_in_field_submits(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.ADD_USER_BTN), Button).press()
            await pilot.pause()

            _fill_form(app, first_name="Ada", last_name="Lovelace", email="ada@example.com", department="Research")
            dept_input = app.query_one(css(ids.FORM_INPUTS["department"]), Input)
            await dept_input.action_submit()
            await pilot.pause()

            assert len(app.directory.store) == 6

    @pytest.mark.asyncio
    async def test_missing_fields_marked(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.ADD_USER_BTN), Button).press()
            await pilot.pause()

            _fill_form(app, first_name="Ada", last_name="Lovelace")
            app.query_one(css(ids.SAVE_USER_BTN), Button).press()
            await pilot.pause()

            form = app.query_one(css(ids.USER_FORM_SECTION), UserForm)
            assert not form.has_class("hidden")
            assert app.query_one(css(ids.FORM_INPUTS["email"]), Input).has_class("missing")
            assert not app.query_one(css(ids.FORM_INPUTS["first_name"]), Input).has_class("missing")
            assert len(app.directory.store) == 5

    @pytest.mark.asyncio
    async def test_edit_key_prefills_selected_row(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.USER_TABLE), UserTable).focus()

            await pilot.press("e")
            await pilot.pause()

            assert app.directory.form.target_id == 1
            assert app.query_one(css(ids.FORM_INPUTS["last_name"]), Input).value == "Graham"

    @pytest.mark.asyncio
    async def test_cancel_button_closes_form(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.ADD_USER_BTN), Button).press()
            await pilot.pause()
            _fill_form(app, first_name="Ada")

            app.query_one(css(ids.CANCEL_FORM_BTN), Button).press()
            await pilot.pause()

            form = app.query_one(css(ids.USER_FORM_SECTION), UserForm)
            assert form.has_class("hidden")
            assert not app.directory.form.is_open
            assert len(app.directory.store) == 5


class TestDeleteEvents:
    """Test delete with confirmation."""

    @pytest.mark.asyncio
    async def test_confirm_yes_deletes(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.USER_TABLE), UserTable).focus()

            await pilot.press("d")
            await pilot.pause()
            assert isinstance(app.screen, ConfirmModal)

            await pilot.press("y")
            await pilot.pause()

            assert not isinstance(app.screen, ConfirmModal)
            assert 1 not in app.directory.store
            assert app.query_one(css(ids.USER_TABLE), UserTable).row_count == 4

    @pytest.mark.asyncio
    async def test_confirm_no_keeps_user(self, users):
        app = _make_app(users)
        async with app.run_test(size=SIZE) as pilot:
            await _wait_loaded(pilot)
            app.query_one(css(ids.DELETE_USER_BTN), Button).press()
            await pilot.pause()
            assert isinstance(app.screen, ConfirmModal)

            app.screen.query_one(css(ids.CONFIRM_NO_BTN), Button).press()
            await pilot.pause()

            assert 1 in app.directory.store
            assert len(app.directory.store) == 5
