"""User table widget: UserTable."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import DataTable
from textual.widgets.data_table import CellDoesNotExist

from model import SortColumn, ViewState
from projection import Projection, RowView, header_label

# Display order of the sortable columns
TABLE_COLUMNS = (
    SortColumn.ID,
    SortColumn.FIRST_NAME,
    SortColumn.LAST_NAME,
    SortColumn.EMAIL,
    SortColumn.DEPARTMENT,
)
ACTIONS_COLUMN = "actions"


def format_actions(row: RowView) -> str:
    """Text for the Actions cell, listing the keys that act on the row."""
    actions = []
    if row.edit_available:
        actions.append("edit (e)")
    if row.delete_available:
        actions.append("delete (d)")
    return " / ".join(actions)


class UserTable(DataTable):
    """The visible page of users. Clicking a header sorts by that column."""

    def __init__(self, **kwargs) -> None:
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)

    def show_projection(self, projection: Projection, view: ViewState) -> None:
        """Redraw headers (with sort glyphs) and rows."""
        self.clear(columns=True)
        for column in TABLE_COLUMNS:
            self.add_column(header_label(column, view), key=column.value)
        self.add_column("Actions", key=ACTIONS_COLUMN)
        for row in projection.rows:
            self.add_row(
                Text(str(row.id), justify="right"),
                Text(row.first_name),
                Text(row.last_name),
                Text(row.email),
                Text(row.department),
                Text(format_actions(row), style="dim"),
                key=str(row.id),
            )

    @property
    def selected_user_id(self) -> int | None:
        """Id of the highlighted row, or None if the table is empty."""
        if self.row_count == 0:
            return None
        try:
            row_key, _ = self.coordinate_to_cell_key(self.cursor_coordinate)
        except CellDoesNotExist:
            return None
        return int(row_key.value) if row_key.value is not None else None
