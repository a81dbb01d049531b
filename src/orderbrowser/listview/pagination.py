"""Pagination window over a sorted order collection.

Page indexes are 0-based. A requested index outside the valid range is
clamped rather than rejected, so a filter that narrows the result set can
never leave the view pointing past the last page.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .models import Order


@dataclass(frozen=True)
class Page:
    """One window of the sorted result set."""

    rows: Tuple[Order, ...]
    page_index: int
    page_size: int
    total_count: int

    @property
    def offset(self) -> int:
        """Calculate offset for current page."""
        return self.page_index * self.page_size

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages (at least one)."""
        return page_count(self.total_count, self.page_size)

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page_index + 1 < self.total_pages

    @property
    def start_row(self) -> int:
        """Get 1-based start row number for display."""
        if self.total_count == 0:
            return 0
        return self.offset + 1

    @property
    def end_row(self) -> int:
        """Get 1-based end row number for display."""
        return min(self.offset + self.page_size, self.total_count)

    @property
    def refs(self) -> Tuple[str, ...]:
        """Refs of the rows on this page, in display order."""
        return tuple(order.ref for order in self.rows)

    def get_display_range(self) -> str:
        """Get formatted display range string."""
        if self.total_count == 0:
            return "Showing 0 results"
        return f"Showing {self.start_row}–{self.end_row} of {self.total_count} results"


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` rows; never less than one."""
    return max(1, math.ceil(total / page_size))


def clamp_page_index(page_index: int, total: int, page_size: int) -> int:
    """Clamp a page index into [0, page_count - 1]."""
    return min(max(page_index, 0), page_count(total, page_size) - 1)


def paginate(orders: Sequence[Order], page_index: int, page_size: int) -> Page:
    """
    Slice one page out of a sorted collection.

    Args:
        orders: Sorted orders.
        page_index: Requested 0-based page; clamped to the valid range.
        page_size: Rows per page. Must be positive; callers validate it.

    Returns:
        The Page at the clamped index.
    """
    total = len(orders)
    index = clamp_page_index(page_index, total, page_size)
    start = index * page_size
    return Page(
        rows=tuple(orders[start:start + page_size]),
        page_index=index,
        page_size=page_size,
        total_count=total,
    )
