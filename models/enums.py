"""
Enums for Bizstock models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ChangeType(models.TextChoices):
    """Direction of a stock movement."""
    IN = 'in', _('Stock in')      # Delivery, return, opening stock
    OUT = 'out', _('Stock out')   # Sale, loss, consumption


class StockStatus(models.TextChoices):
    """
    Four-way stock status, used by alert views.

    CRITICAL and WARNING are both "low stock"; see StockLevel for the
    coarse three-way view.
    """
    OUT_OF_STOCK = 'out_of_stock', _('Out of Stock')
    CRITICAL = 'critical', _('Critical')
    WARNING = 'warning', _('Low Stock')
    NORMAL = 'normal', _('In Stock')


class StockLevel(models.TextChoices):
    """Three-way stock status, used by listings and the product finder."""
    OUT_OF_STOCK = 'out_of_stock', _('Out of Stock')
    LOW_STOCK = 'low_stock', _('Low Stock')
    IN_STOCK = 'in_stock', _('In Stock')


class PriceBucket(models.TextChoices):
    """Price range filter. Limits come from BIZSTOCK settings."""
    ALL = 'all', _('All prices')
    LOW = 'low', _('Low')
    MID = 'mid', _('Mid')
    HIGH = 'high', _('High')


class StockFilter(models.TextChoices):
    """Availability filter of the product finder."""
    ALL = 'all', _('All')
    IN_STOCK = 'in-stock', _('In stock')
    LOW_STOCK = 'low-stock', _('Low stock')
