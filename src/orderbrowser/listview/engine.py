"""List view engine.

Composes filtering, sorting and pagination into a ViewState and owns the
mutable inputs of the list view: filter state, visible search text, sort
spec, page index, page size and the selection. Every change goes through
a method here so the page/selection reset rule is applied in one place.
"""

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..config import config, get_logger, get_table_config
from .chips import Chip, project_chips, remove_chip
from .debounce import Debouncer
from .filter_state import DEFAULT_FILTER_STATE, FilterState
from .filtering import filter_orders
from .models import Order
from .pagination import Page, paginate
from .saved_filters import SavedFilter, SavedFilterStore
from .selection import RowSelection, SelectionTracker
from .sorting import SortField, SortKey, SortSpec, sort_orders, toggle_sort
from .windowing import FullRowWindow, RowWindowProvider

if TYPE_CHECKING:
    from ..data.store import OrderStore

logger = get_logger("engine")

_CACHE_SIZE = 32


@lru_cache(maxsize=_CACHE_SIZE)
def filtered_orders(store: "OrderStore", state: FilterState) -> Tuple[Order, ...]:
    """Filter stage, memoized on store identity and filter state."""
    logger.debug(f"Filtering {len(store)} orders ({state.active_filter_count} active filters)")
    return tuple(filter_orders(store, state))


@lru_cache(maxsize=_CACHE_SIZE)
def sorted_orders(store: "OrderStore", state: FilterState, sort_spec: SortSpec) -> Tuple[Order, ...]:
    """Sort stage over the filtered orders."""
    return sort_orders(filtered_orders(store, state), sort_spec)


@lru_cache(maxsize=_CACHE_SIZE)
def page_of(
    store: "OrderStore", state: FilterState, sort_spec: SortSpec, page_index: int, page_size: int
) -> Page:
    """Pagination stage over the sorted orders."""
    return paginate(sorted_orders(store, state, sort_spec), page_index, page_size)


def clear_view_cache() -> None:
    """Drop memoized stage results."""
    filtered_orders.cache_clear()
    sorted_orders.cache_clear()
    page_of.cache_clear()


@dataclass(frozen=True)
class ViewState:
    """Everything the list view renders, derived from the engine inputs."""

    filters: FilterState
    sort_spec: SortSpec
    filtered: Tuple[Order, ...]
    sorted: Tuple[Order, ...]
    page: Page
    chips: Tuple[Chip, ...]
    selection: Tuple[str, ...]
    search_text: str
    page_selected: bool

    @property
    def total(self) -> int:
        return self.page.total_count

    @property
    def page_count(self) -> int:
        return self.page.total_pages

    @property
    def search(self) -> str:
        """Debounced search term actually applied to the list."""
        return self.filters.search

    @property
    def results_label(self) -> str:
        return self.page.get_display_range()


def build_view_state(
    store: "OrderStore",
    filters: FilterState,
    sort_spec: SortSpec,
    page_index: int,
    page_size: int,
    selection: Sequence[str] = (),
    search_text: Optional[str] = None,
    currency: Optional[str] = None,
) -> ViewState:
    """
    Derive the view state from its inputs.

    Args:
        store: Source orders.
        filters: Filter state, including the debounced search term.
        sort_spec: Sort keys in priority order.
        page_index: Requested page; clamped to the valid range.
        page_size: Rows per page.
        selection: Selected refs.
        search_text: Text currently typed in the search box.
        currency: Currency for price chips.

    Returns:
        A new ViewState.
    """
    sort_spec = tuple(sort_spec)
    page = page_of(store, filters, sort_spec, page_index, page_size)
    selected = set(selection)
    return ViewState(
        filters=filters,
        sort_spec=sort_spec,
        filtered=filtered_orders(store, filters),
        sorted=sorted_orders(store, filters, sort_spec),
        page=page,
        chips=tuple(project_chips(filters, currency)),
        selection=tuple(selection),
        search_text=filters.search if search_text is None else search_text,
        page_selected=bool(page.rows) and all(ref in selected for ref in page.refs),
    )


class ListViewEngine:
    """Stateful front of the list view.

    Args:
        store: Orders to browse.
        page_size: Initial rows per page (defaults to the configured size).
        debounce_ms: Search debounce; 0 applies typed text immediately.
        saved_filters: Saved filter store (a fresh one with built-in
            presets when omitted).
    """

    def __init__(
        self,
        store: "OrderStore",
        page_size: Optional[int] = None,
        debounce_ms: Optional[int] = None,
        saved_filters: Optional[SavedFilterStore] = None,
    ):
        self.store = store
        self.saved_filters = saved_filters if saved_filters is not None else SavedFilterStore()
        self.selection = SelectionTracker()
        self._filters: FilterState = DEFAULT_FILTER_STATE
        self._search_text = ""
        self._sort_spec: SortSpec = ()
        self._page_index = 0
        self._page_size = self._validate_page_size(
            config.app.default_page_size if page_size is None else page_size
        )
        delay = config.app.search_debounce_ms if debounce_ms is None else debounce_ms
        self._debouncer: Optional[Debouncer[str]] = (
            Debouncer(delay, self._commit_search) if delay > 0 else None
        )

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def sort_spec(self) -> SortSpec:
        return self._sort_spec

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_index(self) -> int:
        """Current page index, clamped to the filtered result set."""
        return self.view().page.page_index

    @staticmethod
    def _validate_page_size(page_size: int) -> int:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        return page_size

    def _set_filters(self, filters: FilterState) -> None:
        if filters == self._filters:
            return
        self._filters = filters
        self._reset_window()

    def _reset_window(self) -> None:
        self._page_index = 0
        self.selection.clear()

    def set_filters(self, filters: FilterState) -> None:
        """Replace the explicit filter fields; the debounced search term is kept."""
        self._set_filters(filters.with_search(self._filters.search))

    def update_filters(self, **changes: Any) -> None:
        """Change individual filter fields, e.g. ``update_filters(statuses=["Booked"])``."""
        changes.pop("search", None)
        self._set_filters(replace(self._filters, **changes))

    def toggle_filter(self, field_name: str, value: str) -> None:
        self._set_filters(self._filters.toggle(field_name, value))

    def set_search_text(self, text: str) -> None:
        """
        Record typed search text.

        The term reaches the filters after the debounce delay, or at once
        when called outside a running event loop.
        """
        self._search_text = text or ""
        if self._debouncer is None:
            self._commit_search(self._search_text)
        else:
            self._debouncer.push(self._search_text)

    def submit_search(self) -> None:
        """Apply the typed search text now, skipping the debounce delay."""
        if self._debouncer is not None:
            self._debouncer.cancel()
        self._commit_search(self._search_text)

    def _commit_search(self, text: str) -> None:
        self._set_filters(self._filters.with_search(text))

    def clear_filters(self) -> None:
        """Reset every filter field and the search box."""
        if self._debouncer is not None:
            self._debouncer.cancel()
        self._search_text = ""
        self._set_filters(DEFAULT_FILTER_STATE)

    def set_sort(self, sort_spec: Iterable[SortKey]) -> None:
        """Replace the sort spec; page and selection are kept."""
        self._sort_spec = tuple(sort_spec)

    def toggle_sort(self, field: SortField, multi: bool = False) -> None:
        self._sort_spec = toggle_sort(self._sort_spec, field, multi=multi)

    def set_page_index(self, page_index: int) -> None:
        self._page_index = page_index

    def next_page(self) -> None:
        page = self.view().page
        if page.has_next:
            self._page_index = page.page_index + 1

    def previous_page(self) -> None:
        page = self.view().page
        if page.has_previous:
            self._page_index = page.page_index - 1

    def set_page_size(self, page_size: int) -> None:
        """
        Change rows per page.

        Raises:
            ValueError: If page_size is not positive.
        """
        self._validate_page_size(page_size)
        if page_size == self._page_size:
            return
        self._page_size = page_size
        self._reset_window()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_selection(self, ref: str) -> bool:
        return self.selection.toggle(ref)

    def select_page(self, selected: bool = True) -> None:
        """Select or deselect every row of the current page."""
        self.selection.select_page(self.view().page.refs, selected)

    def apply_row_selection(self, row_selection: RowSelection) -> None:
        """Apply a row-index selection reported for the current page."""
        self.selection.apply_row_selection(self.view().page.rows, row_selection)

    def clear_selection(self) -> None:
        self.selection.clear()

    # ------------------------------------------------------------------
    # Chips and saved filters
    # ------------------------------------------------------------------

    def remove_chip(self, key: str, value: Optional[str] = None) -> None:
        """Remove one applied-filter chip; removing search also clears the box."""
        filters = remove_chip(self._filters, key, value)
        if filters.search != self._filters.search:
            if self._debouncer is not None:
                self._debouncer.cancel()
            self._search_text = filters.search
        self._set_filters(filters)

    def save_filter(self, name: str) -> SavedFilter:
        """Snapshot the current filters, search term included."""
        return self.saved_filters.save(name, self._filters)

    def apply_saved_filter(self, saved: SavedFilter) -> None:
        """Replace filters and search box text with a saved snapshot."""
        if self._debouncer is not None:
            self._debouncer.cancel()
        state = self.saved_filters.apply(saved)
        self._search_text = state.search
        self._set_filters(state)
        logger.info(f"Applied saved filter '{saved.name}'")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def view(self) -> ViewState:
        return build_view_state(
            self.store,
            self._filters,
            self._sort_spec,
            self._page_index,
            self._page_size,
            selection=self.selection.refs,
            search_text=self._search_text,
        )

    def row_selection(self) -> Mapping[int, bool]:
        """Selection of the current page as row indexes, for the renderer."""
        return self.selection.row_selection(self.view().page.rows)

    def export_rows(self) -> List[Order]:
        """Rows to export: the selection in sorted order, or every sorted row."""
        rows = self.view().sorted
        if len(self.selection):
            return [order for order in rows if order.ref in self.selection]
        return list(rows)

    def materialize(self, provider: Optional[RowWindowProvider] = None) -> Tuple[Order, ...]:
        """
        Rows of the current page that the renderer's window covers.

        Args:
            provider: Row window provider; every row is materialized when omitted.
        """
        provider = provider or FullRowWindow()
        rows = self.view().page.rows
        table = get_table_config()
        window = provider.visible_window(len(rows), table.estimated_row_height, table.overscan)
        start = max(0, window.start)
        return rows[start:max(start, window.end)]
