"""Applied-filter chips.

Projects a FilterState into a flat list of removable chips and removes
one chip from a state again. Removing a chip undoes exactly the value it
represents: one status out of three, or only the lower price bound.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from ..config import config
from .filter_state import MULTI_VALUE_FIELDS, FilterState

SEARCH = "search"
DATE_RANGE = "date_range"
PRICE_MIN = "price_min"
PRICE_MAX = "price_max"

# Label prefix per multi-valued field
_VALUE_LABELS = {
    "statuses": "Status",
    "departments": "Department",
    "delivery_statuses": "Delivery",
    "created_by": "Created by",
    "product_tags": "Tag",
    "distribution": "Distribution",
}


@dataclass(frozen=True)
class Chip:
    """A removable applied-filter token."""

    key: str
    label: str
    value: Optional[str] = None


def _format_amount(amount: float) -> str:
    return str(int(amount)) if amount.is_integer() else f"{amount:.2f}"


def project_chips(state: FilterState, currency: Optional[str] = None) -> List[Chip]:
    """
    Build the applied-filter chips for a filter state.

    Args:
        state: Active filter state.
        currency: Currency shown on price chips (defaults to the configured one).

    Returns:
        Chips in display order: search, date, then one chip per value.
    """
    currency = currency or config.app.currency
    chips: List[Chip] = []

    if state.search:
        chips.append(Chip(SEARCH, f"Search: {state.search}"))
    if state.date_range is not None:
        chips.append(Chip(DATE_RANGE, f"Date: {state.date_range.label}"))

    for name in MULTI_VALUE_FIELDS[:3]:
        chips.extend(Chip(name, f"{_VALUE_LABELS[name]}: {v}", v) for v in getattr(state, name))

    low, high = state.price_range
    if low is not None:
        chips.append(Chip(PRICE_MIN, f"Min {_format_amount(low)} {currency}"))
    if high is not None:
        chips.append(Chip(PRICE_MAX, f"Max {_format_amount(high)} {currency}"))

    for name in MULTI_VALUE_FIELDS[3:]:
        chips.extend(Chip(name, f"{_VALUE_LABELS[name]}: {v}", v) for v in getattr(state, name))

    return chips


def remove_chip(state: FilterState, key: str, value: Optional[str] = None) -> FilterState:
    """
    Remove the constraint one chip stands for.

    Args:
        state: Current filter state.
        key: Chip key.
        value: Chip value for multi-valued fields.

    Returns:
        The new filter state, or ``state`` itself when the chip is not present.
    """
    if key == SEARCH:
        return state.with_search("") if state.search else state
    if key == DATE_RANGE:
        return replace(state, date_range=None) if state.date_range is not None else state
    if key == PRICE_MIN:
        low, high = state.price_range
        return state.with_price_range(None, high) if low is not None else state
    if key == PRICE_MAX:
        low, high = state.price_range
        return state.with_price_range(low, None) if high is not None else state
    if key in MULTI_VALUE_FIELDS and value is not None:
        current = getattr(state, key)
        if value in current:
            return state.with_values(key, [v for v in current if v != value])
    return state
