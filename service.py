"""
Inventory Service — The single public interface for all inventory operations.

Usage:
    from bizstock import inventory, InventoryError

    shop = inventory.create_business(name='Fresh Grocers', contact='+1 555-0456')
    cable = inventory.create_product(name='USB-C Cable', sku='tech-usb-002',
                                     business=shop, current_stock=20)
    inventory.adjust_stock(cable.pk, 12, 'out', 'Customer orders')  # 20 → 8
    inventory.list_products(text='usb', stock_status='low-stock')
"""

from bizstock.services.alerts import AlertQueries
from bizstock.services.entities import EntityMutations
from bizstock.services.ledger import StockLedger
from bizstock.services.queries import CatalogQueries


class Inventory(CatalogQueries, EntityMutations, StockLedger, AlertQueries):
    """
    Single interface for all inventory operations.

    Parameter convention: (target id, amounts..., reason)
    Follows the operator's wording: "Take 12 cables out for customer orders"

    IMPORTANT: All state-changing methods use atomic transactions
    with row locks. See each method's docstring.
    """
