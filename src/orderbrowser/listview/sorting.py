"""Multi-key sorting of order records.

Sorting is stable and applies keys from lowest precedence to highest, the
way chained sorted() calls do, so orders that tie on every key keep their
input order. A descending key reverses only its own pass.
"""

import unicodedata
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from ..config import get_table_config
from .models import Order, parse_display_date, parse_price

KeyFunc = Callable[[Order], Any]


class SortField(str, Enum):
    """Sortable order columns."""
    REF = "ref"
    CREATED = "created"
    CUSTOMER = "customer"
    PRODUCTS = "products"
    START = "start"
    END = "end"
    DISTRIBUTION = "distribution"
    STATUS = "status"
    DELIVERY = "delivery"
    PRICE = "price"


@dataclass(frozen=True)
class SortKey:
    """One entry of a sort spec."""

    field: SortField
    descending: bool = False

    def __post_init__(self):
        object.__setattr__(self, "field", SortField(self.field))


SortSpec = Tuple[SortKey, ...]


# Letters NFKD leaves whole, folded onto their base letters
_LETTER_FOLDS = str.maketrans({"ø": "o", "æ": "ae", "œ": "oe", "đ": "d", "ð": "d", "ł": "l", "þ": "th"})


def _collate(text: str) -> Tuple[str, str]:
    """Accent-insensitive primary key, with the case-folded text breaking ties."""
    folded = text.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.translate(_LETTER_FOLDS), folded)


def _text_key(attribute: str) -> KeyFunc:
    def key(order: Order) -> Any:
        value = getattr(order, attribute)
        return _collate(getattr(value, "value", value))
    return key


def _timestamp_key(attribute: str) -> KeyFunc:
    # Unknown and unparseable timestamps sort as the earliest instant
    def key(order: Order) -> datetime:
        return parse_display_date(getattr(order, attribute)) or datetime.min
    return key


def _status_key(order: Order) -> int:
    priority = get_table_config().status_priority
    try:
        return priority.index(order.status.value)
    except ValueError:
        return len(priority)


def _price_key(order: Order) -> Tuple[bool, float]:
    price = parse_price(order.price)
    if price is None:
        return (True, 0.0)
    return (False, price)


def _price_key_descending(order: Order) -> Tuple[bool, float]:
    # Negated instead of reversed so unpriced orders stay last
    missing, price = _price_key(order)
    return (missing, -price)


SORT_KEYS: Dict[SortField, KeyFunc] = {
    SortField.REF: _text_key("ref"),
    SortField.CREATED: _timestamp_key("created"),
    SortField.CUSTOMER: _text_key("customer"),
    SortField.PRODUCTS: _text_key("products"),
    SortField.START: _timestamp_key("start"),
    SortField.END: _timestamp_key("end"),
    SortField.DISTRIBUTION: _text_key("distribution"),
    SortField.STATUS: _status_key,
    SortField.DELIVERY: _text_key("delivery"),
    SortField.PRICE: _price_key,
}

# Fields whose descending order is not the plain reverse of the ascending one
DESCENDING_KEYS: Dict[SortField, KeyFunc] = {
    SortField.PRICE: _price_key_descending,
}


def _sort_pass(sort_key: SortKey) -> Tuple[KeyFunc, bool]:
    """Key function and reverse flag for one sort key."""
    if sort_key.descending and sort_key.field in DESCENDING_KEYS:
        return DESCENDING_KEYS[sort_key.field], False
    return SORT_KEYS[sort_key.field], sort_key.descending


def compare_orders(a: Order, b: Order, sort_spec: Sequence[SortKey]) -> int:
    """
    Three-way comparison of two orders under a sort spec.

    Args:
        a: First order.
        b: Second order.
        sort_spec: Keys in priority order.

    Returns:
        -1, 0 or 1. Zero means the orders tie on every key.
    """
    for sort_key in sort_spec:
        key, reverse = _sort_pass(sort_key)
        left, right = key(a), key(b)
        if left == right:
            continue
        result = -1 if left < right else 1
        return -result if reverse else result
    return 0


def sort_orders(orders: Iterable[Order], sort_spec: Sequence[SortKey]) -> Tuple[Order, ...]:
    """
    Return a new, sorted tuple of orders; an empty spec keeps input order.

    Orders without a readable price come after priced ones in both directions.
    """
    result = list(orders)
    for sort_key in reversed(tuple(sort_spec)):
        key, reverse = _sort_pass(sort_key)
        result.sort(key=key, reverse=reverse)
    return tuple(result)


def parse_sort_spec(text: Optional[str]) -> SortSpec:
    """
    Parse a sort spec such as "status,price:desc".

    Raises:
        ValueError: If a field is not sortable or a direction is unknown.
    """
    if not text:
        return ()
    spec = []
    for part in text.split(","):
        name, _, direction = part.strip().partition(":")
        if direction not in ("", "asc", "desc"):
            raise ValueError(f"Unknown sort direction: {direction}")
        spec.append(SortKey(SortField(name), descending=direction == "desc"))
    return tuple(spec)


def toggle_sort(sort_spec: Sequence[SortKey], field: SortField, multi: bool = False) -> SortSpec:
    """
    Cycle a column through ascending, descending and unsorted.

    Args:
        sort_spec: Current sort spec.
        field: Column that was clicked.
        multi: Keep the other keys (shift-click) instead of replacing them.

    Returns:
        The new sort spec.
    """
    field = SortField(field)
    current = next((key for key in sort_spec if key.field is field), None)
    others = tuple(key for key in sort_spec if key.field is not field) if multi else ()

    if current is None:
        return others + (SortKey(field),)
    if not current.descending:
        flipped = SortKey(field, descending=True)
        if multi:
            return tuple(flipped if key.field is field else key for key in sort_spec)
        return (flipped,)
    return others
