"""Order store and saved filter services for the API."""

from functools import lru_cache
from typing import Optional

from orderbrowser.config import config, get_logger
from orderbrowser.data import OrderStore, load_sample_store
from orderbrowser.listview import SavedFilterStore, clear_view_cache

logger = get_logger("api.orders")

_saved_filters: Optional[SavedFilterStore] = None


@lru_cache
def get_order_store() -> OrderStore:
    """Load the configured orders file, or the demo set when none is configured."""
    if config.data.orders_path:
        return OrderStore.load_json(config.data.orders_path)
    logger.info("No orders file configured, serving sample orders")
    return load_sample_store()


def get_saved_filter_store() -> SavedFilterStore:
    """Get the process-wide saved filter store."""
    global _saved_filters
    if _saved_filters is None:
        _saved_filters = SavedFilterStore()
    return _saved_filters


def reset_services() -> None:
    """Drop the cached order store, its memoized views and all user saved filters."""
    global _saved_filters
    get_order_store.cache_clear()
    clear_view_cache()
    _saved_filters = None
