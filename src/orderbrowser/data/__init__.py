"""Order data sources."""

from .store import OrderStore, OrderStoreError
from .sample import load_sample_store, sample_records

__all__ = [
    "OrderStore",
    "OrderStoreError",
    "load_sample_store",
    "sample_records",
]
