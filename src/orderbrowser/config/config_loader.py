"""YAML configuration for the order list.

ui_config.yaml holds table settings, the status sort priority and the
filter option lists; presets.yaml holds the built-in saved filters.
Missing or broken files are logged and replaced by the defaults in
constants.py, so the list view always has a usable configuration.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .constants import (
    CREATED_BY_OPTIONS,
    DELIVERY_OPTIONS,
    DEPARTMENT_OPTIONS,
    ESTIMATED_ROW_HEIGHT,
    PAGE_SIZE_OPTIONS,
    PRODUCT_TAG_OPTIONS,
    ROW_OVERSCAN,
    STATUS_OPTIONS,
    STATUS_PRIORITY,
)
from .logging_config import get_logger

logger = get_logger("config")

CONFIG_DIR = Path(__file__).parent


class ConfigurationError(Exception):
    """Raised when a configuration file is missing or unreadable."""
    pass


def _load_yaml_file(filename: str) -> Dict[str, Any]:
    """
    Read one YAML file from CONFIG_DIR.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping.
    """
    path = CONFIG_DIR / filename
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {path}")
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load {filename}: {e}")

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"{filename} must contain a mapping")
    return content


def _lookup(data: Dict[str, Any], path: str, default: Any) -> Any:
    """Follow a dotted path into nested mappings, e.g. "tables.rows.overscan"."""
    node: Any = data
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


@lru_cache(maxsize=1)
def load_ui_config() -> Dict[str, Any]:
    """Load ui_config.yaml, or an empty mapping so every accessor uses its default."""
    try:
        return _load_yaml_file("ui_config.yaml")
    except ConfigurationError as e:
        logger.warning(f"Using built-in UI defaults: {e}")
        return {}


@lru_cache(maxsize=1)
def load_presets() -> Dict[str, Any]:
    """Load presets.yaml."""
    try:
        return _load_yaml_file("presets.yaml")
    except ConfigurationError as e:
        logger.warning(f"No built-in presets loaded: {e}")
        return {}


@dataclass(frozen=True)
class FilterOptions:
    """Selectable values for each multi-select filter."""

    statuses: List[str] = field(default_factory=lambda: list(STATUS_OPTIONS))
    delivery_statuses: List[str] = field(default_factory=lambda: list(DELIVERY_OPTIONS))
    departments: List[str] = field(default_factory=lambda: list(DEPARTMENT_OPTIONS))
    created_by: List[str] = field(default_factory=lambda: list(CREATED_BY_OPTIONS))
    product_tags: List[str] = field(default_factory=lambda: list(PRODUCT_TAG_OPTIONS))
    distribution: List[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, data: Dict[str, Any]) -> "FilterOptions":
        defaults = cls()
        departments = _lookup(data, "filters.departments", defaults.departments)
        return cls(
            statuses=_lookup(data, "filters.statuses", defaults.statuses),
            delivery_statuses=_lookup(data, "filters.delivery_statuses", defaults.delivery_statuses),
            departments=departments,
            created_by=_lookup(data, "filters.created_by", defaults.created_by),
            product_tags=_lookup(data, "filters.product_tags", defaults.product_tags),
            # Distribution locations default to the department list
            distribution=_lookup(data, "filters.distribution", list(departments)),
        )

    def as_dict(self) -> Dict[str, List[str]]:
        """Option lists keyed by FilterState field name."""
        return {
            "statuses": self.statuses,
            "delivery_statuses": self.delivery_statuses,
            "departments": self.departments,
            "created_by": self.created_by,
            "product_tags": self.product_tags,
            "distribution": self.distribution,
        }


@dataclass(frozen=True)
class TableConfig:
    """Order table settings."""

    page_size_options: List[int] = field(default_factory=lambda: list(PAGE_SIZE_OPTIONS))
    estimated_row_height: int = ESTIMATED_ROW_HEIGHT
    overscan: int = ROW_OVERSCAN
    status_priority: List[str] = field(default_factory=lambda: list(STATUS_PRIORITY))

    @classmethod
    def from_config(cls, data: Dict[str, Any]) -> "TableConfig":
        defaults = cls()
        return cls(
            page_size_options=_lookup(data, "tables.pagination.page_size_options", defaults.page_size_options),
            estimated_row_height=_lookup(data, "tables.rows.estimated_height", defaults.estimated_row_height),
            overscan=_lookup(data, "tables.rows.overscan", defaults.overscan),
            status_priority=_lookup(data, "sorting.status_priority", defaults.status_priority),
        )


@dataclass(frozen=True)
class BuiltInPresets:
    """Built-in saved filters keyed by preset id."""

    presets: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, data: Dict[str, Any]) -> "BuiltInPresets":
        return cls(presets=_lookup(data, "presets", None) or {})

    def get_preset(self, key: str) -> Optional[Dict[str, Any]]:
        return self.presets.get(key)

    def get_all_presets(self) -> Dict[str, Dict[str, Any]]:
        return self.presets


@lru_cache(maxsize=1)
def get_filter_options() -> FilterOptions:
    """Get filter option lists."""
    return FilterOptions.from_config(load_ui_config())


@lru_cache(maxsize=1)
def get_table_config() -> TableConfig:
    """Get table configuration."""
    return TableConfig.from_config(load_ui_config())


@lru_cache(maxsize=1)
def get_built_in_presets() -> BuiltInPresets:
    """Get built-in preset configuration."""
    return BuiltInPresets.from_config(load_presets())


def reload_all_config() -> None:
    """Drop cached configuration so the YAML files are read again."""
    for cached in (load_ui_config, load_presets, get_filter_options, get_table_config, get_built_in_presets):
        cached.cache_clear()
