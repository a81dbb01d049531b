"""Configuration module for Order Browser.

All filter defaults are empty: an empty filter shows every order.
"""

from .settings import config, DataConfig, AppConfig, Config
from .constants import (
    EMPTY_VALUE,
    EXPORT_COLUMNS,
    SEARCH_FIELDS,
    STATUS_OPTIONS,
    STATUS_PRIORITY,
    DELIVERY_OPTIONS,
    DEPARTMENT_OPTIONS,
    CREATED_BY_OPTIONS,
    PRODUCT_TAG_OPTIONS,
    DATE_PRESETS,
    PAGE_SIZE_OPTIONS,
    ESTIMATED_ROW_HEIGHT,
    ROW_OVERSCAN,
)
from .config_loader import (
    ConfigurationError,
    get_filter_options,
    get_table_config,
    get_built_in_presets,
    reload_all_config,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    # Settings
    "config",
    "DataConfig",
    "AppConfig",
    "Config",
    # Constants
    "EMPTY_VALUE",
    "EXPORT_COLUMNS",
    "SEARCH_FIELDS",
    "STATUS_OPTIONS",
    "STATUS_PRIORITY",
    "DELIVERY_OPTIONS",
    "DEPARTMENT_OPTIONS",
    "CREATED_BY_OPTIONS",
    "PRODUCT_TAG_OPTIONS",
    "DATE_PRESETS",
    "PAGE_SIZE_OPTIONS",
    "ESTIMATED_ROW_HEIGHT",
    "ROW_OVERSCAN",
    # Loader
    "ConfigurationError",
    "get_filter_options",
    "get_table_config",
    "get_built_in_presets",
    "reload_all_config",
    # Logging
    "setup_logging",
    "get_logger",
]
