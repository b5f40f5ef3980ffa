"""
Stock-status classification — isolated, testable, reusable.

Derives a product's stock status from its current quantity and its
minimum-stock threshold:

    - OUT_OF_STOCK: nothing left
    - CRITICAL: at or below half the threshold
    - WARNING: above half the threshold, at or below the threshold
    - NORMAL: above the threshold

With min_stock=1 there is no integer quantity that is CRITICAL
(it would need 0 < stock <= 0.5), so those products go straight
from WARNING to OUT_OF_STOCK.
"""

from bizstock.models.enums import StockLevel, StockStatus


def classify(current_stock: int, min_stock: int) -> StockStatus:
    """
    Four-way status of a quantity against its threshold.

    Args:
        current_stock: Quantity on hand (>= 0)
        min_stock: Minimum-stock threshold (>= 0)

    Returns:
        StockStatus
    """
    if current_stock <= 0:
        return StockStatus.OUT_OF_STOCK
    # current <= min * 0.5, kept in integers
    if current_stock * 2 <= min_stock:
        return StockStatus.CRITICAL
    if current_stock <= min_stock:
        return StockStatus.WARNING
    return StockStatus.NORMAL


def coarse_status(status: StockStatus) -> StockLevel:
    """Collapse CRITICAL and WARNING into LOW_STOCK."""
    if status == StockStatus.OUT_OF_STOCK:
        return StockLevel.OUT_OF_STOCK
    if status == StockStatus.NORMAL:
        return StockLevel.IN_STOCK
    return StockLevel.LOW_STOCK


def stock_level(current_stock: int, min_stock: int) -> StockLevel:
    """Three-way status used by listings and the product finder."""
    return coarse_status(classify(current_stock, min_stock))


def needs_restock(current_stock: int, min_stock: int) -> bool:
    """True when the product belongs on the alerts page."""
    return current_stock <= min_stock
