"""API routers."""

from orderbrowser.api.routers import orders, presets

__all__ = ["orders", "presets"]
