"""Row window contract for virtualized rendering.

A renderer that only draws the rows in its viewport implements
RowWindowProvider; the engine hands it the page row count and then
materializes just the rows the returned window covers.
"""

from dataclasses import dataclass
from typing import Protocol, Tuple

from ..config import ESTIMATED_ROW_HEIGHT, ROW_OVERSCAN


@dataclass(frozen=True)
class RowWindow:
    """Half-open range [start, end) of page rows plus their pixel offsets."""

    start: int
    end: int
    offsets: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return max(0, self.end - self.start)


class RowWindowProvider(Protocol):
    def visible_window(
        self,
        row_count: int,
        estimated_row_height: int = ESTIMATED_ROW_HEIGHT,
        overscan: int = ROW_OVERSCAN,
    ) -> RowWindow:
        ...


class FullRowWindow:
    """Provider that treats every row of the page as visible."""

    def visible_window(
        self,
        row_count: int,
        estimated_row_height: int = ESTIMATED_ROW_HEIGHT,
        overscan: int = ROW_OVERSCAN,
    ) -> RowWindow:
        offsets = tuple(index * estimated_row_height for index in range(row_count))
        return RowWindow(start=0, end=row_count, offsets=offsets)
