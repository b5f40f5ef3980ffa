"""
Catalog queries — read-only operations.

All methods are classmethods on Inventory and use no locking.
Every call re-reads the database, so a committed mutation is visible
to the next query without any cache to invalidate.
"""

from dataclasses import dataclass
from decimal import Decimal

from django.db.models import Sum
from django.db.models.functions import Coalesce

from bizstock.conf import bizstock_settings
from bizstock.exceptions import NotFoundError
from bizstock.filters import ProductFilter, filter_business_queryset, filter_product_queryset
from bizstock.models.business import Business
from bizstock.models.movement import StockMovement
from bizstock.models.product import Product


@dataclass(frozen=True)
class InventorySummary:
    """Dashboard figures."""

    total_products: int
    total_businesses: int
    low_stock_count: int
    total_items: int
    inventory_value: Decimal


class CatalogQueries:
    """Read-only catalog query methods."""

    @classmethod
    def get_business(cls, business_id) -> Business:
        """
        Raises:
            NotFoundError: If the business doesn't exist
        """
        try:
            return Business.objects.with_product_count().get(pk=business_id)
        except (Business.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(model='Business', pk=business_id)

    @classmethod
    def get_product(cls, product_id) -> Product:
        """
        Product with its business name joined.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        try:
            return Product.objects.with_business_name().get(pk=product_id)
        except (Product.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(model='Product', pk=product_id)

    @classmethod
    def list_businesses(cls, text: str = ''):
        """Businesses, newest first, with product_count annotated."""
        qs = Business.objects.with_product_count().order_by('-created_at', '-id')
        return filter_business_queryset(qs, text)

    @classmethod
    def list_products(cls, criteria: ProductFilter | None = None, **overrides):
        """
        Products, newest first, with the business name joined.

        Args:
            criteria: Optional ProductFilter applied in SQL
        """
        qs = Product.objects.with_business_name()
        if criteria is not None or overrides:
            qs = filter_product_queryset(qs, criteria, **overrides)
        return qs

    @classmethod
    def product_count(cls, business) -> int:
        """Number of products referencing a business (instance or id)."""
        return Product.objects.for_business(business).count()

    @classmethod
    def stock_history(cls, limit: int | None = None, product=None) -> list[StockMovement]:
        """
        Latest stock movements, newest first, with product name and SKU.

        Args:
            limit: Max rows (None = BIZSTOCK['HISTORY_LIMIT'])
            product: Restrict to one product (instance or id)
        """
        qs = StockMovement.objects.with_product()
        if product is not None:
            qs = qs.for_product(product)
        if limit is None:
            limit = bizstock_settings.HISTORY_LIMIT
        return list(qs[:limit])

    @classmethod
    def recent_activity(cls) -> list[StockMovement]:
        """The few latest movements shown on the dashboard."""
        return cls.stock_history(limit=bizstock_settings.RECENT_ACTIVITY_LIMIT)

    @classmethod
    def summary(cls) -> InventorySummary:
        """
        Dashboard figures.

        low_stock_count counts products at or below their threshold,
        out-of-stock ones included.
        """
        products = Product.objects.all()
        total_items = products.aggregate(
            t=Coalesce(Sum('current_stock'), 0)
        )['t']
        value = sum(
            (price * stock for price, stock in products.values_list('price', 'current_stock')),
            Decimal('0'),
        )
        return InventorySummary(
            total_products=products.count(),
            total_businesses=Business.objects.count(),
            low_stock_count=products.needs_restock().count(),
            total_items=total_items,
            inventory_value=value,
        )
