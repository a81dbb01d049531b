"""Filter predicate evaluation for order records.

Each filter field is a predicate of (order, state) that returns True when
the field does not constrain the order or the order satisfies it. An order
matches when every predicate holds.
"""

from datetime import datetime
from typing import Callable, Iterable, List, Tuple

from ..config import SEARCH_FIELDS
from .filter_state import FilterState
from .models import Order, parse_display_date, parse_price

Predicate = Callable[[Order, FilterState], bool]


def _field_text(order: Order, name: str) -> str:
    value = getattr(order, name)
    return getattr(value, "value", value) or ""


def matches_search(order: Order, state: FilterState) -> bool:
    """Case-insensitive substring test across the searchable fields."""
    if not state.search:
        return True
    term = state.search.lower()
    return any(term in _field_text(order, name).lower() for name in SEARCH_FIELDS)


def matches_date_range(order: Order, state: FilterState) -> bool:
    """Inclusive created-date interval test; unparseable dates never match."""
    date_range = state.date_range
    if date_range is None or not date_range.is_bounded:
        return True
    created = parse_display_date(order.created)
    if created is None:
        return False
    start = date_range.start or datetime.min
    end = date_range.end or datetime.max
    return start <= created <= end


def matches_statuses(order: Order, state: FilterState) -> bool:
    return not state.statuses or order.status.value in state.statuses


def matches_departments(order: Order, state: FilterState) -> bool:
    return not state.departments or order.department in state.departments


def matches_delivery_statuses(order: Order, state: FilterState) -> bool:
    return not state.delivery_statuses or order.delivery.value in state.delivery_statuses


def matches_price_range(order: Order, state: FilterState) -> bool:
    """Inclusive price test using whichever bounds are set.

    Orders whose price cannot be read are treated as having no price and
    are excluded while the range is active.
    """
    low, high = state.price_range
    if low is None and high is None:
        return True
    price = parse_price(order.price)
    if price is None:
        return False
    if low is not None and price < low:
        return False
    if high is not None and price > high:
        return False
    return True


def matches_created_by(order: Order, state: FilterState) -> bool:
    return not state.created_by or order.created_by in state.created_by


def matches_product_tags(order: Order, state: FilterState) -> bool:
    if not state.product_tags:
        return True
    return order.product_tag is not None and order.product_tag in state.product_tags


def matches_distribution(order: Order, state: FilterState) -> bool:
    # Substring, not equality: "Grøubøgata 1" matches "Grøubøgata 1, Oslo"
    if not state.distribution:
        return True
    return any(location in order.distribution for location in state.distribution)


PREDICATES: Tuple[Predicate, ...] = (
    matches_search,
    matches_date_range,
    matches_statuses,
    matches_departments,
    matches_delivery_statuses,
    matches_price_range,
    matches_created_by,
    matches_product_tags,
    matches_distribution,
)


def matches(order: Order, state: FilterState) -> bool:
    """
    Check whether an order satisfies every active constraint.

    Args:
        order: Order to test.
        state: Filter state to test against.

    Returns:
        True if the order is part of the filtered result set.
    """
    return all(predicate(order, state) for predicate in PREDICATES)


def filter_orders(orders: Iterable[Order], state: FilterState) -> List[Order]:
    """Return the orders matching the filter state, in their original order."""
    if state.is_empty:
        return list(orders)
    return [order for order in orders if matches(order, state)]
