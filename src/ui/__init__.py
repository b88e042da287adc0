"""UI module containing widgets, modals, and styles."""

from ui.widgets import (
    ACTIONS_COLUMN,
    TABLE_COLUMNS,
    PaginationBar,
    UserForm,
    UserTable,
    format_actions,
)
from ui.modals import ConfirmModal
from ui import ids

__all__ = [
    # Widgets
    "ACTIONS_COLUMN",
    "TABLE_COLUMNS",
    "PaginationBar",
    "UserForm",
    "UserTable",
    "format_actions",
    # Modals
    "ConfirmModal",
]
