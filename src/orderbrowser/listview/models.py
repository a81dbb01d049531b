"""Order record model and display-value parsing."""

import math
import re
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..config import EMPTY_VALUE, config


class OrderStatus(str, Enum):
    """Booking status of an order."""
    BOOKED = "Booked"
    CANCELLED = "Cancelled"
    CLOSED = "Closed"
    DROPPED = "Dropped"
    IN_CART = "In Cart"
    REQUEST = "Request"
    TEST = "Test"


class DeliveryStatus(str, Enum):
    """Delivery status of an order; UNSET is shown as an em dash."""
    READY_TO_PICKUP = "Ready to pickup"
    PICKED_UP = "Picked up"
    RETURNED = "Returned"
    DELAYED = "Delayed"
    CANCELLED = "Cancelled"
    TO_TRANSPORT = "To transport"
    ON_CHECKING = "On checking"
    UNSET = EMPTY_VALUE


# Record keys as they appear in JSON payloads and exports
_RECORD_KEYS = {
    "created_by": "createdBy",
    "product_tag": "productTag",
}


@dataclass(frozen=True)
class Order:
    """A single order as held by the order store.

    Timestamps and price are kept as display strings; use
    parse_display_date and parse_price to get comparable values.
    """

    id: str
    ref: str
    created: str
    customer: str
    products: str
    start: str
    end: str
    distribution: str
    status: OrderStatus
    delivery: DeliveryStatus
    price: str
    department: str
    created_by: str
    product_tag: Optional[str] = None
    delayed: Optional[bool] = None
    notes: Optional[str] = None

    @property
    def is_delayed(self) -> bool:
        """Whether the row should be highlighted as delayed."""
        return bool(self.delayed) or self.delivery is DeliveryStatus.DELAYED

    def to_record(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict with camelCase keys."""
        record = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            record[_RECORD_KEYS.get(f.name, f.name)] = value
        return record

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> "Order":
        """Create from a dict using either camelCase or snake_case keys.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If status or delivery is not a known value.
        """
        def pick(name: str, default: Any = None, required: bool = True) -> Any:
            key = _RECORD_KEYS.get(name, name)
            if key in data:
                return data[key]
            if name in data:
                return data[name]
            if required:
                raise KeyError(key)
            return default

        return cls(
            id=str(pick("id")),
            ref=pick("ref"),
            created=pick("created"),
            customer=pick("customer"),
            products=pick("products"),
            start=pick("start"),
            end=pick("end", EMPTY_VALUE, required=False),
            distribution=pick("distribution"),
            status=OrderStatus(pick("status")),
            delivery=DeliveryStatus(pick("delivery", EMPTY_VALUE, required=False)),
            price=pick("price"),
            department=pick("department"),
            created_by=pick("created_by"),
            product_tag=pick("product_tag", required=False),
            delayed=pick("delayed", required=False),
            notes=pick("notes", required=False),
        )


def parse_display_date(value: Optional[str], fmt: Optional[str] = None) -> Optional[datetime]:
    """
    Parse a display timestamp such as "15 Jul 2020 22:00".

    Args:
        value: Display string; the em dash sentinel means unknown.
        fmt: strptime format (defaults to the configured display format).

    Returns:
        Parsed datetime, or None for the sentinel and unparseable strings.
    """
    if not value or value == EMPTY_VALUE:
        return None
    try:
        return datetime.strptime(value.strip(), fmt or config.app.date_format)
    except ValueError:
        return None


_NON_NUMERIC = re.compile(r"[^0-9.,\-]")


def parse_price(price: Optional[str]) -> Optional[float]:
    """
    Parse the numeric magnitude of a display price such as "1,600.00 NOK".

    Currency text is dropped and thousands/decimal separators are
    normalized ("1.600,00" and "1,600.00" both give 1600.0). A lone
    separator followed by exactly three digits is a thousands separator,
    whether it is a comma or a dot ("1,600" and "1.600" give 1600.0).

    Returns:
        The price as float, or None when no number can be read.
    """
    cleaned = _NON_NUMERIC.sub("", price or "")

    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        head, _, tail = cleaned.rpartition(",")
        if head and len(tail) == 3:
            cleaned = cleaned.replace(",", "")
        else:
            cleaned = head.replace(",", "") + "." + tail
    elif "." in cleaned:
        head, _, tail = cleaned.rpartition(".")
        if cleaned.count(".") > 1 or (head and len(tail) == 3):
            cleaned = cleaned.replace(".", "")

    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) else None
