"""
Bizstock configuration.

Usage in settings.py:
    BIZSTOCK = {
        "DEFAULT_MIN_STOCK": 10,
        "LOW_PRICE_LIMIT": 500,
        "HIGH_PRICE_LIMIT": 2000,
        "HISTORY_LIMIT": 50,
        "UNKNOWN_BUSINESS_NAME": "Unknown Business",
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class BizstockSettings:
    """Bizstock configuration settings."""

    # Minimum stock threshold for products created without one
    DEFAULT_MIN_STOCK: int = 10

    # Price buckets: low < LOW_PRICE_LIMIT <= mid < HIGH_PRICE_LIMIT <= high
    LOW_PRICE_LIMIT: int = 500
    HIGH_PRICE_LIMIT: int = 2000

    # Number of movements returned by stock_history()
    HISTORY_LIMIT: int = 50

    # Number of movements shown as recent activity on the dashboard
    RECENT_ACTIVITY_LIMIT: int = 5

    # Label shown when a product's business cannot be resolved
    UNKNOWN_BUSINESS_NAME: str = "Unknown Business"

    # Module size (in SVG units) for rendered QR codes
    QR_SCALE: int = 4


def get_bizstock_settings() -> BizstockSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "BIZSTOCK", {})
    return BizstockSettings(**{
        k: v for k, v in user_settings.items()
        if k in BizstockSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_bizstock_settings(), name)


bizstock_settings = _LazySettings()
