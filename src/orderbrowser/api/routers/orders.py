"""Orders API router."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from orderbrowser.analysis import EXPORT_FORMATS, MEDIA_TYPES, OrderExporter
from orderbrowser.api.config import get_settings
from orderbrowser.api.models.schemas import (
    FilterOptionsResponse,
    OrderItem,
    OrderListResponse,
)
from orderbrowser.api.services import get_order_store
from orderbrowser.config import DATE_PRESETS, get_filter_options, get_table_config
from orderbrowser.listview import (
    DateRange,
    FilterState,
    SortSpec,
    build_view_state,
    parse_sort_spec,
)

router = APIRouter()

settings = get_settings()


def _split(value: Optional[str]) -> list[str]:
    """Split a comma-separated query value, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_filter_state(
    search: Optional[str] = Query(None, description="Free-text search"),
    date_preset: Optional[str] = Query(None, description="Today, Last 7 or This month"),
    date_from: Optional[date] = Query(None, description="Created on or after"),
    date_to: Optional[date] = Query(None, description="Created on or before"),
    statuses: Optional[str] = Query(None, description="Comma-separated order statuses"),
    departments: Optional[str] = Query(None, description="Comma-separated departments"),
    delivery_statuses: Optional[str] = Query(None, description="Comma-separated delivery statuses"),
    created_by: Optional[str] = Query(None, description="Comma-separated creators"),
    product_tags: Optional[str] = Query(None, description="Comma-separated product tags"),
    distribution: Optional[str] = Query(None, description="Comma-separated distribution fragments"),
    price_min: Optional[float] = Query(None, description="Minimum price, inclusive"),
    price_max: Optional[float] = Query(None, description="Maximum price, inclusive"),
) -> FilterState:
    """Parse filter query parameters into a FilterState."""
    date_range = None
    if date_preset:
        try:
            date_range = DateRange.preset(date_preset)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    elif date_from or date_to:
        date_range = DateRange.custom(date_from, date_to)

    return FilterState(
        search=search or "",
        date_range=date_range,
        statuses=_split(statuses),
        departments=_split(departments),
        delivery_statuses=_split(delivery_statuses),
        created_by=_split(created_by),
        product_tags=_split(product_tags),
        distribution=_split(distribution),
        price_range=(price_min, price_max),
    )


def parse_sort(
    sort: Optional[str] = Query(None, description="Sort keys, e.g. status,price:desc"),
) -> SortSpec:
    """Parse the sort query parameter."""
    try:
        return parse_sort_spec(sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def format_sort_spec(sort_spec: SortSpec) -> str:
    """Inverse of parse_sort_spec."""
    return ",".join(
        f"{key.field.value}:desc" if key.descending else key.field.value for key in sort_spec
    )


@router.get("", response_model=OrderListResponse)
async def list_orders(
    filters: FilterState = Depends(parse_filter_state),
    sort_spec: SortSpec = Depends(parse_sort),
    page: int = Query(0, description="0-based page index; clamped to the valid range"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Results per page"
    ),
):
    """List orders with filtering, sorting and pagination."""
    view = build_view_state(get_order_store(), filters, sort_spec, page, page_size)

    return {
        "orders": [order.to_record() for order in view.page.rows],
        "pagination": {
            "page": view.page.page_index,
            "page_size": view.page.page_size,
            "total": view.total,
            "total_pages": view.page_count,
            "has_next": view.page.has_next,
            "has_previous": view.page.has_previous,
            "display_range": view.results_label,
        },
        "chips": [
            {"key": chip.key, "label": chip.label, "value": chip.value}
            for chip in view.chips
        ],
        "sort": format_sort_spec(view.sort_spec) or None,
    }


@router.get("/options", response_model=FilterOptionsResponse)
async def get_options():
    """Get the values offered by each filter control."""
    options = get_filter_options().as_dict()
    return {
        **options,
        "date_presets": list(DATE_PRESETS),
        "page_size_options": get_table_config().page_size_options,
    }


@router.get("/export")
async def export_orders(
    format: str = Query("csv", description="csv, tsv, json or xlsx"),
    refs: Optional[str] = Query(None, description="Comma-separated refs to export (the selection)"),
    filters: FilterState = Depends(parse_filter_state),
    sort_spec: SortSpec = Depends(parse_sort),
):
    """Export filtered and sorted orders, or only the selected refs."""
    if format not in EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {format}")

    view = build_view_state(get_order_store(), filters, sort_spec, 0, settings.default_page_size)
    rows = view.sorted
    selected = set(_split(refs))
    if selected:
        rows = tuple(order for order in rows if order.ref in selected)

    exporter = OrderExporter()
    buffer = exporter.export(rows, format)
    filename = exporter.generate_filename(extension=EXPORT_FORMATS[format], include_timestamp=False)

    return StreamingResponse(
        iter([buffer.getvalue()]),
        media_type=MEDIA_TYPES[format],
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/{ref}", response_model=OrderItem)
async def get_order(ref: str):
    """Get a single order by ref."""
    order = get_order_store().get(ref)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order.to_record()
