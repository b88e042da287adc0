"""Add/edit form state."""

from dataclasses import dataclass
from enum import Enum


class FormMode(Enum):
    """Lifecycle of the user form."""

    IDLE = "idle"
    ADDING = "adding"
    EDITING = "editing"


@dataclass
class FormState:
    """Which form is open, and for which record when editing."""

    mode: FormMode = FormMode.IDLE
    target_id: int | None = None

    @property
    def is_open(self) -> bool:
        return self.mode != FormMode.IDLE

    @property
    def title(self) -> str:
        return "Edit User" if self.mode == FormMode.EDITING else "Add User"

    def start_add(self) -> None:
        self.mode = FormMode.ADDING
        self.target_id = None

    def start_edit(self, user_id: int) -> None:
        self.mode = FormMode.EDITING
        self.target_id = user_id

    def reset(self) -> None:
        self.mode = FormMode.IDLE
        self.target_id = None
