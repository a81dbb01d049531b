"""Pytest configuration and fixtures for Order Browser tests."""

import pytest

from orderbrowser.data import OrderStore, load_sample_store
from orderbrowser.listview import Order, OrderStatus, DeliveryStatus


def build_order(ref: str, **overrides) -> Order:
    """Build an order with neutral defaults."""
    values = {
        "id": ref,
        "ref": ref,
        "created": "15 Jul 2020 22:00",
        "customer": f"Customer {ref}",
        "products": "Test bike",
        "start": "08 Aug 2020 14:00",
        "end": "12 Aug 2020 14:00",
        "distribution": "Avdeling 16, Oslo",
        "status": OrderStatus.BOOKED,
        "delivery": DeliveryStatus.READY_TO_PICKUP,
        "price": "100.00 NOK",
        "department": "Avdeling 16",
        "created_by": "Camilla",
        "product_tag": "Road bike",
    }
    values.update(overrides)
    return Order(**values)


@pytest.fixture
def make_order():
    """Factory for single orders."""
    return build_order


@pytest.fixture
def order_pair():
    """Two orders differing in status and price."""
    return [
        build_order("A1", status=OrderStatus.BOOKED, price="100.00 NOK"),
        build_order("A2", status=OrderStatus.CLOSED, price="50.00 NOK"),
    ]


@pytest.fixture
def pair_store(order_pair):
    """Store holding the order pair."""
    return OrderStore(order_pair, source="pair")


@pytest.fixture
def sample_store():
    """The 64-order demo store."""
    return load_sample_store()
