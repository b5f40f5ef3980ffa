"""
Inventory services — modular organization of inventory operations.

    from bizstock.services import CatalogQueries, EntityMutations, StockLedger, AlertQueries

The Inventory facade in bizstock.service combines them.
"""

from bizstock.services.alerts import AlertBuckets, AlertQueries
from bizstock.services.entities import EntityMutations
from bizstock.services.ledger import StockAdjustment, StockLedger
from bizstock.services.queries import CatalogQueries, InventorySummary

__all__ = [
    'AlertBuckets',
    'AlertQueries',
    'CatalogQueries',
    'EntityMutations',
    'InventorySummary',
    'StockAdjustment',
    'StockLedger',
]
