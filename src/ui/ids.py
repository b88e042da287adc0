"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
MAIN_CONTENT = "main-content"
FOOTER_BAR = "footer-bar"
STATUS_BAR = "status-bar"

# Toolbar
SEARCH_INPUT = "search-input"
ADD_USER_BTN = "add-user-btn"
RELOAD_BTN = "reload-btn"

# Table and row actions
USER_TABLE = "user-table"
ROW_ACTIONS = "row-actions"
EDIT_USER_BTN = "edit-user-btn"
DELETE_USER_BTN = "delete-user-btn"
EMPTY_HINT = "empty-hint"

# Pagination
PAGINATION_BAR = "pagination-bar"
PREV_PAGE_BTN = "prev-page-btn"
NEXT_PAGE_BTN = "next-page-btn"
PAGE_INFO = "page-info"
ROWS_PER_PAGE = "rows-per-page"

# User form
USER_FORM_SECTION = "user-form-section"
FORM_TITLE = "form-title"
FIRST_NAME_INPUT = "first-name-input"
LAST_NAME_INPUT = "last-name-input"
EMAIL_INPUT = "email-input"
DEPARTMENT_INPUT = "department-input"
SAVE_USER_BTN = "save-user-btn"
CANCEL_FORM_BTN = "cancel-form-btn"

# Draft field name -> form input ID
FORM_INPUTS = {
    "first_name": FIRST_NAME_INPUT,
    "last_name": LAST_NAME_INPUT,
    "email": EMAIL_INPUT,
    "department": DEPARTMENT_INPUT,
}

# Confirm modal
CONFIRM_DIALOG = "confirm-dialog"
CONFIRM_MESSAGE = "confirm-message"
MODAL_TITLE = "modal-title"
MODAL_BUTTONS = "modal-buttons"
CONFIRM_YES_BTN = "confirm-yes-btn"
CONFIRM_NO_BTN = "confirm-no-btn"
