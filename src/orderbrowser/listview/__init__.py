"""List view engine: filter, sort, paginate and select order records."""

from .models import Order, OrderStatus, DeliveryStatus, parse_display_date, parse_price
from .filter_state import DateRange, FilterState, DEFAULT_FILTER_STATE, MULTI_VALUE_FIELDS
from .filtering import matches, filter_orders
from .sorting import SortField, SortKey, SortSpec, compare_orders, sort_orders, parse_sort_spec, toggle_sort
from .pagination import Page, paginate, page_count, clamp_page_index
from .selection import SelectionTracker
from .chips import Chip, project_chips, remove_chip
from .saved_filters import SavedFilter, SavedFilterStore
from .debounce import Debouncer
from .windowing import RowWindow, RowWindowProvider, FullRowWindow
from .engine import ListViewEngine, ViewState, build_view_state, clear_view_cache

__all__ = [
    # Records
    "Order",
    "OrderStatus",
    "DeliveryStatus",
    "parse_display_date",
    "parse_price",
    # Filtering
    "DateRange",
    "FilterState",
    "DEFAULT_FILTER_STATE",
    "MULTI_VALUE_FIELDS",
    "matches",
    "filter_orders",
    # Sorting
    "SortField",
    "SortKey",
    "SortSpec",
    "compare_orders",
    "sort_orders",
    "parse_sort_spec",
    "toggle_sort",
    # Pagination
    "Page",
    "paginate",
    "page_count",
    "clamp_page_index",
    # Selection, chips, saved filters
    "SelectionTracker",
    "Chip",
    "project_chips",
    "remove_chip",
    "SavedFilter",
    "SavedFilterStore",
    "Debouncer",
    # Rendering
    "RowWindow",
    "RowWindowProvider",
    "FullRowWindow",
    "ListViewEngine",
    "ViewState",
    "build_view_state",
    "clear_view_cache",
]
