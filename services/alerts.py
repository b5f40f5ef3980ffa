"""
Stock alerts — products at or below their minimum stock.

Usage:
    from bizstock import inventory

    alerts = inventory.stock_alerts()
    alerts.critical   # list of products, lowest stock first
"""

import logging
from dataclasses import dataclass, field

from bizstock.models.enums import StockStatus
from bizstock.models.product import Product
from bizstock.status import classify

logger = logging.getLogger('bizstock')


@dataclass
class AlertBuckets:
    """Products needing restock, grouped by four-way status."""

    out_of_stock: list = field(default_factory=list)
    critical: list = field(default_factory=list)
    warning: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.out_of_stock) + len(self.critical) + len(self.warning)

    def __iter__(self):
        """All alerting products, lowest stock first."""
        return iter(sorted(
            [*self.out_of_stock, *self.critical, *self.warning],
            key=lambda p: p.current_stock,
        ))

    def bucket(self, status: StockStatus) -> list:
        return {
            StockStatus.OUT_OF_STOCK: self.out_of_stock,
            StockStatus.CRITICAL: self.critical,
            StockStatus.WARNING: self.warning,
        }.get(status, [])


class AlertQueries:
    """Alert view methods."""

    @classmethod
    def stock_alerts(cls, business=None) -> AlertBuckets:
        """
        Check every product and bucket those needing restock.

        Args:
            business: Optional business (instance or id) to restrict to

        Returns:
            AlertBuckets, each bucket sorted by ascending stock
        """
        qs = Product.objects.with_business_name().needs_restock()
        if business is not None:
            qs = qs.for_business(business)

        buckets = AlertBuckets()
        for product in qs.order_by('current_stock', 'name'):
            status = classify(product.current_stock, product.min_stock)
            buckets.bucket(status).append(product)
            logger.warning(
                "inventory.alert.triggered",
                extra={
                    "product_id": product.pk,
                    "sku": product.sku,
                    "current_stock": product.current_stock,
                    "min_stock": product.min_stock,
                    "status": str(status),
                },
            )

        return buckets
