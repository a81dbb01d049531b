"""Application settings read from the environment (and a .env file)."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

load_dotenv()

# Repository root (src/orderbrowser/config -> root)
PROJECT_ROOT = Path(__file__).resolve().parents[3]


def _env_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    return int(raw) if raw else default


def _env_path(name: str, default: Optional[Path] = None) -> Optional[Path]:
    raw = os.getenv(name)
    return Path(raw) if raw else default


@dataclass
class DataConfig:
    """Where orders come from and where exports go."""

    # JSON file of orders; the bundled sample set is used when unset
    orders_path: Optional[Path] = field(default_factory=lambda: _env_path("ORDERS_PATH"))
    exports_path: Path = field(
        default_factory=lambda: _env_path("EXPORTS_PATH", PROJECT_ROOT / "data" / "exports")
    )


@dataclass
class AppConfig:
    """List view behaviour and display settings."""

    name: str = field(default_factory=lambda: _env_str("APP_NAME", "Order Browser"))
    version: str = field(default_factory=lambda: _env_str("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    currency: str = field(default_factory=lambda: _env_str("ORDER_CURRENCY", "NOK"))
    # created/start/end display format, e.g. "15 Jul 2020 22:00"
    date_format: str = "%d %b %Y %H:%M"
    search_debounce_ms: int = field(default_factory=lambda: _env_int("SEARCH_DEBOUNCE_MS", 300))
    default_page_size: int = field(default_factory=lambda: _env_int("DEFAULT_PAGE_SIZE", 10))


@dataclass
class Config:
    data: DataConfig = field(default_factory=DataConfig)
    app: AppConfig = field(default_factory=AppConfig)


config = Config()
