"""Analysis and export of order data."""

from .export import OrderExporter, EXPORT_FORMATS, MEDIA_TYPES

__all__ = ["OrderExporter", "EXPORT_FORMATS", "MEDIA_TYPES"]
