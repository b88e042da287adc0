"""Custom Textual widgets for userdir.

This package contains all custom widgets organized by area of the screen.
"""

from ui.widgets.user_table import (
    ACTIONS_COLUMN,
    TABLE_COLUMNS,
    UserTable,
    format_actions,
)
from ui.widgets.pagination import PaginationBar
from ui.widgets.user_form import UserForm

__all__ = [
    # Table widgets
    "ACTIONS_COLUMN",
    "TABLE_COLUMNS",
    "UserTable",
    "format_actions",
    # Pagination widgets
    "PaginationBar",
    # Form widgets
    "UserForm",
]
