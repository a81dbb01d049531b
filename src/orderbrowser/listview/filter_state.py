"""Filter state for the order list.

FilterState is an immutable value: every change produces a new instance,
which keeps it hashable for memoized recomputation of the list view.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Iterable, Optional, Tuple

from ..config import DATE_PRESETS

# Multi-valued fields, in chip display order
MULTI_VALUE_FIELDS: Tuple[str, ...] = (
    "statuses",
    "departments",
    "delivery_statuses",
    "created_by",
    "product_tags",
    "distribution",
)

PriceRange = Tuple[Optional[float], Optional[float]]


def _unique(values: Iterable[Any]) -> Tuple[str, ...]:
    """Order-preserving de-duplication into a tuple of strings."""
    seen = []
    for value in values or ():
        value = getattr(value, "value", value)
        if value not in seen:
            seen.append(value)
    return tuple(seen)


def _parse_bound(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class DateRange:
    """A labelled created-date interval; a missing bound is unbounded."""

    label: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DateRange":
        return cls(
            label=data.get("label", "Custom"),
            start=_parse_bound(data.get("start")),
            end=_parse_bound(data.get("end")),
        )

    @classmethod
    def custom(cls, start: Optional[date] = None, end: Optional[date] = None) -> "DateRange":
        """Build a custom range from calendar days, inclusive of the whole end day."""
        if end is not None and not isinstance(end, datetime):
            end = datetime.combine(end, time.max)
        return cls(label="Custom", start=_parse_bound(start), end=end)

    @classmethod
    def preset(cls, label: str, now: Optional[datetime] = None) -> "DateRange":
        """
        Build one of the quick date presets ("Today", "Last 7", "This month").

        Args:
            label: Preset label from DATE_PRESETS.
            now: Reference time (defaults to the current time).

        Raises:
            ValueError: If the label is unknown or names the custom range.
        """
        if label not in DATE_PRESETS or DATE_PRESETS[label] is None:
            raise ValueError(f"Unknown date preset: {label}")
        now = now or datetime.now()
        return cls(label=label, start=now - timedelta(days=DATE_PRESETS[label]), end=now)


@dataclass(frozen=True)
class FilterState:
    """Current filter state of the order list.

    Empty values mean "no constraint". Values inside a field are OR-ed,
    distinct fields are AND-ed.
    """

    search: str = ""
    date_range: Optional[DateRange] = None
    statuses: Tuple[str, ...] = ()
    departments: Tuple[str, ...] = ()
    delivery_statuses: Tuple[str, ...] = ()
    price_range: PriceRange = (None, None)
    created_by: Tuple[str, ...] = ()
    product_tags: Tuple[str, ...] = ()
    distribution: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists/sets from callers but always store ordered tuples
        for name in MULTI_VALUE_FIELDS:
            object.__setattr__(self, name, _unique(getattr(self, name)))
        low, high = self.price_range or (None, None)
        object.__setattr__(
            self,
            "price_range",
            (None if low is None else float(low), None if high is None else float(high)),
        )
        object.__setattr__(self, "search", self.search or "")

    @property
    def is_empty(self) -> bool:
        """Check if all filters are empty (showing all data)."""
        return self.active_filter_count == 0

    @property
    def active_filter_count(self) -> int:
        """Count of fields that currently constrain the result set."""
        count = sum(1 for name in MULTI_VALUE_FIELDS if getattr(self, name))
        if self.search:
            count += 1
        if self.date_range is not None and self.date_range.is_bounded:
            count += 1
        if self.price_range[0] is not None or self.price_range[1] is not None:
            count += 1
        return count

    def with_search(self, search: str) -> "FilterState":
        """Return a copy with a new search term."""
        return replace(self, search=search or "")

    def with_values(self, field_name: str, values: Iterable[str]) -> "FilterState":
        """Return a copy with a multi-valued field replaced."""
        if field_name not in MULTI_VALUE_FIELDS:
            raise ValueError(f"Not a multi-valued filter: {field_name}")
        return replace(self, **{field_name: tuple(values)})

    def toggle(self, field_name: str, value: str) -> "FilterState":
        """Add a value to a multi-valued field, or remove it if present."""
        current = getattr(self, field_name)
        if value in current:
            return self.with_values(field_name, [v for v in current if v != value])
        return self.with_values(field_name, current + (value,))

    def with_price_range(self, low: Optional[float], high: Optional[float]) -> "FilterState":
        return replace(self, price_range=(low, high))

    def with_date_range(self, date_range: Optional[DateRange]) -> "FilterState":
        return replace(self, date_range=date_range)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        data: Dict[str, Any] = {
            "search": self.search,
            "date_range": self.date_range.to_dict() if self.date_range else None,
            "price_range": list(self.price_range),
        }
        for name in MULTI_VALUE_FIELDS:
            data[name] = list(getattr(self, name))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterState":
        """Create from dictionary; missing keys fall back to no constraint."""
        date_range = data.get("date_range")
        price_range = data.get("price_range") or (None, None)
        return cls(
            search=data.get("search", ""),
            date_range=DateRange.from_dict(date_range) if date_range else None,
            price_range=(price_range[0], price_range[1]),
            **{name: data.get(name) or () for name in MULTI_VALUE_FIELDS},
        )


DEFAULT_FILTER_STATE = FilterState()
