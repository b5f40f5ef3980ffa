"""
StockMovement model — immutable ledger of stock changes.
"""

from django.db import models, transaction
from django.db.models import OuterRef, Subquery
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from bizstock.models.enums import ChangeType


class StockMovementQuerySet(models.QuerySet):
    """QuerySet with the product join used by history listings."""

    def with_product(self):
        """
        Annotate product name and SKU for display (not authoritative).

        Subqueries rather than a join: movements of a deleted product
        stay listed, with both values None.
        """
        from bizstock.models.product import Product

        product = Product.objects.filter(pk=OuterRef('product_id'))
        return self.annotate(
            product_name=Subquery(product.values('name')[:1]),
            product_sku=Subquery(product.values('sku')[:1]),
        )

    def for_product(self, product):
        """Filter movements of a product (instance or id)."""
        product_id = getattr(product, 'pk', product)
        return self.filter(product_id=product_id)


class StockMovement(models.Model):
    """
    Immutable record of a stock change.

    Rules:
    - NEVER update() or delete()
    - Corrections are new movements (see ledger.recount)
    - Writes Product.current_stock atomically on save()

    This is the ONLY model that changes stock.

    The product reference carries no database constraint, so the
    audit trail outlives the product it describes.
    """

    product = models.ForeignKey(
        'bizstock.Product',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='movements',
        verbose_name=_('Product'),
    )
    change_type = models.CharField(
        max_length=3,
        choices=ChangeType.choices,
        verbose_name=_('Type'),
    )
    change_amount = models.IntegerField(
        verbose_name=_('Change'),
        help_text=_('Positive = in, negative = out'),
    )
    previous_stock = models.PositiveIntegerField(verbose_name=_('Previous stock'))
    new_stock = models.PositiveIntegerField(verbose_name=_('New stock'))
    reason = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name=_('Reason'),
        help_text=_('E.g. "New shipment received", "Customer orders"'),
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Created at'))

    objects = StockMovementQuerySet.as_manager()

    class Meta:
        verbose_name = _('Stock movement')
        verbose_name_plural = _('Stock movements')
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['product', 'created_at'], name='bizstock_move_product_ts_idx'),
        ]

    def save(self, *args, **kwargs):
        """Save movement and write the product's stock atomically."""
        if self.pk:
            raise ValueError(
                "Stock movements are immutable. "
                "To correct, record a new movement."
            )

        if self.previous_stock + self.change_amount != self.new_stock:
            raise ValueError(
                f"Inconsistent movement: {self.previous_stock} "
                f"{self.change_amount:+d} != {self.new_stock}"
            )

        with transaction.atomic():
            super().save(*args, **kwargs)

            from bizstock.models.product import Product

            Product.objects.filter(pk=self.product_id).update(
                current_stock=self.new_stock,
                updated_at=timezone.now(),
            )

    def delete(self, *args, **kwargs):
        """Prevent deletion — movements are immutable."""
        raise ValueError(
            "Stock movements are immutable. "
            "To reverse, record a new movement with the inverse change."
        )

    def __str__(self) -> str:
        return f"{self.change_amount:+d} ({self.previous_stock} → {self.new_stock}) | {self.reason}"
