"""Table view state: search, sort and pagination."""

from dataclasses import dataclass
from enum import Enum

from constants import DEFAULT_PAGE_SIZE


class SortColumn(Enum):
    """Columns the table can be sorted by."""

    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    DEPARTMENT = "department"

    @property
    def label(self) -> str:
        """Column header text."""
        return _COLUMN_LABELS[self]


_COLUMN_LABELS = {
    SortColumn.ID: "ID",
    SortColumn.FIRST_NAME: "First Name",
    SortColumn.LAST_NAME: "Last Name",
    SortColumn.EMAIL: "Email",
    SortColumn.DEPARTMENT: "Department",
}


class SortDirection(Enum):
    """Sort order for the active column."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self == SortDirection.ASC else SortDirection.ASC


@dataclass
class ViewState:
    """UI-only state that decides which rows are visible.

    current_page is 1-based. It may go stale after a mutation (e.g. the last
    row on the last page is deleted); projection.project clamps it.
    """

    search_term: str = ""
    sort_column: SortColumn | None = None  # None keeps store order
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1
    rows_per_page: int = DEFAULT_PAGE_SIZE

    def select_sort(self, column: SortColumn) -> None:
        """Toggle direction on the active column, or switch column ascending."""
        if self.sort_column == column:
            self.sort_direction = self.sort_direction.toggled()
        else:
            self.sort_column = column
            self.sort_direction = SortDirection.ASC
