"""Constants for Order Browser.

Static defaults for the order list. Option lists and presets can be
overridden through the YAML files read by config_loader.
"""

from typing import Dict, List, Optional

# =============================================================================
# Sentinels
# =============================================================================

# Shown for an unknown end time and an unset delivery status
EMPTY_VALUE = "—"


# =============================================================================
# Columns
# =============================================================================

# Fixed field order of every export payload
EXPORT_COLUMNS: List[str] = [
    "ref",
    "created",
    "customer",
    "products",
    "start",
    "end",
    "distribution",
    "status",
    "delivery",
    "price",
    "department",
    "createdBy",
    "productTag",
]

# Fields scanned by the free-text search box
SEARCH_FIELDS: List[str] = [
    "ref",
    "customer",
    "products",
    "status",
    "delivery",
    "distribution",
    "created",
]


# =============================================================================
# Filter option lists
# =============================================================================

STATUS_OPTIONS: List[str] = [
    "Booked",
    "In Cart",
    "Cancelled",
    "Closed",
    "Dropped",
    "Request",
    "Test",
]

# Operational ordering used when sorting by status
STATUS_PRIORITY: List[str] = list(STATUS_OPTIONS)

DELIVERY_OPTIONS: List[str] = [
    "Ready to pickup",
    "Picked up",
    "Returned",
    "Delayed",
    "Cancelled",
    "To transport",
    "On checking",
    EMPTY_VALUE,
]

DEPARTMENT_OPTIONS: List[str] = [
    "Grøubøgata 1",
    "Avdeling 16",
    "Ekebergveien 65",
    "Ekeberg Logistikk",
    "Distribution Hub",
]

CREATED_BY_OPTIONS: List[str] = ["Camilla", "Sindre", "Jonas", "System", "Helga"]

PRODUCT_TAG_OPTIONS: List[str] = [
    "Road bike",
    "E-bike",
    "Accessories",
    "Components",
    "Subscription",
    "Logistics",
]

# Label -> days back from now; None is a custom range
DATE_PRESETS: Dict[str, Optional[int]] = {
    "Today": 0,
    "Last 7": 7,
    "This month": 30,
    "Custom": None,
}


# =============================================================================
# Table
# =============================================================================

PAGE_SIZE_OPTIONS: List[int] = [10, 20, 50, 100]
ESTIMATED_ROW_HEIGHT = 56
ROW_OVERSCAN = 8
