"""
Bizstock Models.

Core models for inventory tracking:
- Business: Shops that own products
- Product: Stock level, price and threshold of an item
- StockMovement: Immutable ledger of stock changes
"""

from bizstock.models.business import Business
from bizstock.models.enums import ChangeType, PriceBucket, StockFilter, StockLevel, StockStatus
from bizstock.models.movement import StockMovement
from bizstock.models.product import Product

__all__ = [
    'ChangeType',
    'StockStatus',
    'StockLevel',
    'PriceBucket',
    'StockFilter',
    'Business',
    'Product',
    'StockMovement',
]
