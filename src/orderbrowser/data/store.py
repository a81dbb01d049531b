"""Immutable in-memory order store."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from ..config import get_logger
from ..listview.models import Order

logger = get_logger("store")


class OrderStoreError(Exception):
    """Raised when orders cannot be loaded into a store."""
    pass


class OrderStore(Sequence[Order]):
    """
    Ordered, read-only collection of orders with unique refs.

    Stores compare and hash by identity, which is what the list view
    memoizes on: a new data set means a new store.
    """

    def __init__(self, orders: Iterable[Order] = (), source: Optional[str] = None):
        self._orders = tuple(orders)
        self.source = source
        self._by_ref: Dict[str, Order] = {}
        for order in self._orders:
            if order.ref in self._by_ref:
                raise OrderStoreError(f"Duplicate order ref: {order.ref}")
            self._by_ref[order.ref] = order

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def __getitem__(self, index):
        return self._orders[index]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_ref
        return item in self._orders

    def __repr__(self) -> str:
        return f"OrderStore({len(self)} orders, source={self.source!r})"

    def get(self, ref: str) -> Optional[Order]:
        """Look up an order by ref."""
        return self._by_ref.get(ref)

    @property
    def refs(self) -> List[str]:
        return list(self._by_ref)

    @classmethod
    def from_records(
        cls, records: Iterable[Dict[str, Any]], source: Optional[str] = None
    ) -> "OrderStore":
        """
        Build a store from record dicts (camelCase or snake_case keys).

        Raises:
            OrderStoreError: If a record is malformed or a ref repeats.
        """
        orders = []
        for position, record in enumerate(records):
            try:
                orders.append(Order.from_record(record))
            except (KeyError, ValueError, TypeError) as e:
                raise OrderStoreError(f"Invalid order record at position {position}: {e}") from e
        return cls(orders, source=source)

    @classmethod
    def load_json(cls, path: Union[str, Path]) -> "OrderStore":
        """
        Load orders from a JSON file holding a list of records.

        The list may also be wrapped as ``{"orders": [...]}``.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise OrderStoreError(f"Cannot read orders from {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("orders", [])
        if not isinstance(data, list):
            raise OrderStoreError(f"Expected a list of orders in {path}")

        store = cls.from_records(data, source=str(path))
        logger.info(f"Loaded {len(store)} orders from {path}")
        return store
