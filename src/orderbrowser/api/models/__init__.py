"""API models."""

from orderbrowser.api.models.schemas import (
    ChipItem,
    CreatePresetRequest,
    FilterOptionsResponse,
    OrderItem,
    OrderListResponse,
    PaginationInfo,
    PresetResponse,
)

__all__ = [
    "ChipItem",
    "CreatePresetRequest",
    "FilterOptionsResponse",
    "OrderItem",
    "OrderListResponse",
    "PaginationInfo",
    "PresetResponse",
]
