"""API services."""

from orderbrowser.api.services.orders import (
    get_order_store,
    get_saved_filter_store,
    reset_services,
)

__all__ = ["get_order_store", "get_saved_filter_store", "reset_services"]
