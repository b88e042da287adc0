"""Pagination footer widget: PaginationBar."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Label, Select

from constants import DEFAULT_PAGE_SIZE, PAGE_SIZES
from projection import Projection
from ui.ids import css
import ui.ids as ids


class PaginationBar(Horizontal):
    """Prev/Next buttons, "Page X of Y" and the rows-per-page selector."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE, **kwargs) -> None:
        super().__init__(**kwargs)
        self._page_size = page_size

    def compose(self) -> ComposeResult:
        yield Button("< Prev", id=ids.PREV_PAGE_BTN, disabled=True)
        yield Label("Page 1 of 1", id=ids.PAGE_INFO)
        yield Button("Next >", id=ids.NEXT_PAGE_BTN, disabled=True)
        yield Label("Rows per page:", classes="section-label")
        yield Select(
            [(str(n), n) for n in sorted({*PAGE_SIZES, self._page_size})],
            value=self._page_size,
            allow_blank=False,
            id=ids.ROWS_PER_PAGE,
        )

    def show(self, projection: Projection) -> None:
        """Update page info and disable navigation at the bounds."""
        self.query_one(css(ids.PAGE_INFO), Label).update(projection.page_label)
        self.query_one(css(ids.PREV_PAGE_BTN), Button).disabled = not projection.has_previous
        self.query_one(css(ids.NEXT_PAGE_BTN), Button).disabled = not projection.has_next
