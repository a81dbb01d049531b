"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class OrderItem(BaseModel):
    """An order as shown in the list and detail views."""
    id: str
    ref: str
    created: str
    customer: str
    products: str
    start: str
    end: str
    distribution: str
    status: str
    delivery: str
    price: str
    department: str
    createdBy: str
    productTag: Optional[str] = None
    delayed: Optional[bool] = None
    notes: Optional[str] = None


class PaginationInfo(BaseModel):
    """Pagination metadata; pages are 0-based."""
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool
    display_range: str


class ChipItem(BaseModel):
    """An applied-filter chip."""
    key: str
    label: str
    value: Optional[str] = None


class OrderListResponse(BaseModel):
    """Paginated order list response."""
    orders: list[OrderItem]
    pagination: PaginationInfo
    chips: list[ChipItem]
    sort: Optional[str] = None


class FilterOptionsResponse(BaseModel):
    """Values offered by each filter control."""
    statuses: list[str]
    delivery_statuses: list[str]
    departments: list[str]
    created_by: list[str]
    product_tags: list[str]
    distribution: list[str]
    date_presets: list[str]
    page_size_options: list[int]


class CreatePresetRequest(BaseModel):
    """Request body for saving the current filters."""
    name: str = Field(..., min_length=1)
    filters: dict = Field(default_factory=dict, description="FilterState as a dict, search included")


class PresetResponse(BaseModel):
    """A saved filter."""
    id: str
    name: str
    filters: dict
    isBuiltIn: bool
    createdAt: str
