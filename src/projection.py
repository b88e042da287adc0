"""View projection: filter -> sort -> paginate.

Every function here is pure. The store is never mutated; each step returns
a new list.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from model import SortColumn, SortDirection, UserRecord, ViewState

ASC_GLYPH = "↑"
DESC_GLYPH = "↓"
NEUTRAL_GLYPH = "⬍"


@dataclass(frozen=True)
class RowView:
    """Render instruction for one table row."""

    id: int
    first_name: str
    last_name: str
    email: str
    department: str
    edit_available: bool = True
    delete_available: bool = True


@dataclass(frozen=True)
class Projection:
    """The visible page plus pagination metadata."""

    rows: tuple[RowView, ...]
    page: int
    total_pages: int
    total_count: int  # Records in the store
    matched_count: int  # Records left after filtering

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def page_label(self) -> str:
        return f"Page {self.page} of {self.total_pages}"


def matches(record: UserRecord, term: str) -> bool:
    """Case-insensitive substring match on full name, email or department.

    The term is used as typed; only the empty string matches everything.
    """
    if term == "":
        return True
    needle = term.lower()
    return (
        needle in record.full_name.lower()
        or needle in record.email.lower()
        or needle in record.department.lower()
    )


def filter_records(records: Iterable[UserRecord], term: str) -> list[UserRecord]:
    """Keep records matching the search term. An empty term keeps everything."""
    return [r for r in records if matches(r, term)]


_SORT_KEYS: dict[SortColumn, Callable[[UserRecord], int | str]] = {
    SortColumn.ID: lambda r: r.id,
    SortColumn.FIRST_NAME: lambda r: r.first_name.lower(),
    SortColumn.LAST_NAME: lambda r: r.last_name.lower(),
    SortColumn.EMAIL: lambda r: r.email.lower(),
    SortColumn.DEPARTMENT: lambda r: r.department.lower(),
}


def sort_records(
    records: Iterable[UserRecord],
    column: SortColumn | None,
    direction: SortDirection = SortDirection.ASC,
) -> list[UserRecord]:
    """Stable sort by column; ties keep their input order in both directions.

    With no column the input order is kept.
    """
    if column is None:
        return list(records)
    # sorted(reverse=True) preserves the relative order of equal keys
    return sorted(
        records,
        key=_SORT_KEYS[column],
        reverse=direction == SortDirection.DESC,
    )


def total_pages(count: int, rows_per_page: int) -> int:
    """Number of pages needed for count rows; never less than 1."""
    if rows_per_page <= 0:
        raise ValueError(f"rows_per_page must be positive (got {rows_per_page})")
    return max(1, math.ceil(count / rows_per_page))


def clamp_page(page: int, pages: int) -> int:
    """Clamp a 1-based page number into [1, pages]."""
    return min(max(1, page), max(1, pages))


def paginate(records: Sequence[UserRecord], page: int, rows_per_page: int) -> list[UserRecord]:
    """Slice out one 1-based page."""
    start = (page - 1) * rows_per_page
    return list(records[start : start + rows_per_page])


def to_row_view(record: UserRecord) -> RowView:
    return RowView(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        email=record.email,
        department=record.department,
    )


def project(records: Sequence[UserRecord], view: ViewState) -> Projection:
    """Derive the visible page from the store and the view state.

    The returned page is clamped; callers should write it back into the view
    state so the next navigation starts from a valid page.
    """
    filtered = filter_records(records, view.search_term)
    ordered = sort_records(filtered, view.sort_column, view.sort_direction)
    pages = total_pages(len(ordered), view.rows_per_page)
    page = clamp_page(view.current_page, pages)
    visible = paginate(ordered, page, view.rows_per_page)
    return Projection(
        rows=tuple(to_row_view(r) for r in visible),
        page=page,
        total_pages=pages,
        total_count=len(records),
        matched_count=len(ordered),
    )


def sort_indicator(column: SortColumn, view: ViewState) -> str:
    """Header glyph for a column: ascending, descending or neutral."""
    if view.sort_column != column:
        return NEUTRAL_GLYPH
    return ASC_GLYPH if view.sort_direction == SortDirection.ASC else DESC_GLYPH


def header_label(column: SortColumn, view: ViewState) -> str:
    """Header text with its sort glyph, e.g. "Last Name ↑"."""
    return f"{column.label} {sort_indicator(column, view)}"
