"""Model classes for userdir."""

from model.user_record import UserDraft, UserRecord, split_full_name
from model.view_state import SortColumn, SortDirection, ViewState
from model.form_state import FormMode, FormState

__all__ = [
    "UserDraft",
    "UserRecord",
    "split_full_name",
    "SortColumn",
    "SortDirection",
    "ViewState",
    "FormMode",
    "FormState",
]
