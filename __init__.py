"""
Django Bizstock — small business inventory tracker.

Businesses own products; products carry stock levels, prices and a
minimum-stock threshold; every stock change is an immutable movement.

Usage:
    from bizstock import inventory, InventoryError

    inventory.adjust_stock(product.pk, 12, 'out', 'Customer orders')
    inventory.list_products(text='avocado')
    inventory.stock_alerts()
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'inventory':
        from bizstock.service import Inventory
        return Inventory
    elif name in ('InventoryError', 'ValidationError', 'NotFoundError',
                  'InvalidQuantityError', 'InsufficientStockError', 'BackendError'):
        from bizstock import exceptions
        return getattr(exceptions, name)
    elif name in ('Business', 'Product', 'StockMovement', 'ChangeType',
                  'StockStatus', 'StockLevel'):
        from bizstock import models
        return getattr(models, name)
    elif name in ('ProductFilter', 'filter_products', 'filter_businesses'):
        from bizstock import filters
        return getattr(filters, name)
    elif name == 'classify':
        from bizstock.status import classify
        return classify
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'inventory',
    'InventoryError',
    'ValidationError',
    'NotFoundError',
    'InvalidQuantityError',
    'InsufficientStockError',
    'BackendError',
    'Business',
    'Product',
    'StockMovement',
    'ChangeType',
    'StockStatus',
    'StockLevel',
    'ProductFilter',
    'filter_products',
    'filter_businesses',
    'classify',
]

__version__ = '0.1.0'
