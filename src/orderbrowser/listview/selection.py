"""Selection tracking by stable order ref.

Rendering layers report selection as row positions on the page they are
showing. Row positions change with every sort or page change, so they are
translated to refs here and never stored.
"""

from typing import Dict, Iterable, Iterator, Mapping, Sequence, Tuple, Union

from ..config import get_logger
from .models import Order

logger = get_logger("selection")

RowSelection = Union[Mapping[int, bool], Iterable[int]]


class SelectionTracker:
    """Set of selected order refs, kept in selection order."""

    def __init__(self, refs: Iterable[str] = ()):
        self._refs: Dict[str, None] = dict.fromkeys(refs)

    def __contains__(self, ref: object) -> bool:
        return ref in self._refs

    def __iter__(self) -> Iterator[str]:
        return iter(self._refs)

    def __len__(self) -> int:
        return len(self._refs)

    @property
    def refs(self) -> Tuple[str, ...]:
        """Selected refs in the order they were selected."""
        return tuple(self._refs)

    def contains(self, ref: str) -> bool:
        return ref in self._refs

    def toggle(self, ref: str) -> bool:
        """
        Flip the selection of one order.

        Returns:
            True if the order is selected afterwards.
        """
        if ref in self._refs:
            del self._refs[ref]
            return False
        self._refs[ref] = None
        return True

    def set_all(self, refs: Iterable[str]) -> None:
        """Replace the whole selection."""
        self._refs = dict.fromkeys(refs)

    def clear(self) -> None:
        if self._refs:
            logger.debug(f"Clearing selection of {len(self._refs)} orders")
        self._refs.clear()

    def select_page(self, page_refs: Sequence[str], selected: bool) -> None:
        """
        Select or deselect every row of the rendered page.

        Selections on other pages are left untouched.
        """
        if selected:
            for ref in page_refs:
                self._refs.setdefault(ref, None)
        else:
            for ref in page_refs:
                self._refs.pop(ref, None)

    def is_page_selected(self, page_refs: Sequence[str]) -> bool:
        """Header checkbox state: True when the page is non-empty and fully selected."""
        return bool(page_refs) and all(ref in self._refs for ref in page_refs)

    def apply_row_selection(self, page_rows: Sequence[Order], row_selection: RowSelection) -> None:
        """
        Apply a row-position selection reported for the rendered page.

        Args:
            page_rows: Rows of the page currently rendered, in display order.
            row_selection: Either a mapping of row index to selected flag or
                an iterable of selected row indexes. Indexes outside the page
                are ignored.
        """
        if isinstance(row_selection, Mapping):
            indexes = {int(index) for index, flag in row_selection.items() if flag}
        else:
            indexes = {int(index) for index in row_selection}

        for position, order in enumerate(page_rows):
            if position in indexes:
                self._refs.setdefault(order.ref, None)
            else:
                self._refs.pop(order.ref, None)

    def row_selection(self, page_rows: Sequence[Order]) -> Dict[int, bool]:
        """Map the selection back to row positions of the rendered page."""
        return {
            position: True
            for position, order in enumerate(page_rows)
            if order.ref in self._refs
        }
