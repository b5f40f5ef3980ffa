"""
Product model — stock level, price and threshold of one item.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F, Sum
from django.db.models.functions import Coalesce
from django.utils.translation import gettext_lazy as _

# Upper bound of PositiveIntegerField on every supported backend
MAX_STOCK = 2147483647


def default_min_stock() -> int:
    """Threshold for products created without one (BIZSTOCK['DEFAULT_MIN_STOCK'])."""
    from bizstock.conf import bizstock_settings
    return bizstock_settings.DEFAULT_MIN_STOCK


class ProductQuerySet(models.QuerySet):
    """QuerySet with the business-name join and stock helpers."""

    def with_business_name(self):
        """
        Resolve the owning business name at read time.

        The name is never stored on the product; renaming a business is
        visible on the next read without touching product rows.
        """
        return self.annotate(joined_business_name=F('business__name'))

    def for_business(self, business):
        """Filter products referencing a business (instance or id)."""
        business_id = getattr(business, 'pk', business)
        return self.filter(business_id=business_id)

    def needs_restock(self):
        """Products at or below their minimum stock (out-of-stock included)."""
        return self.filter(current_stock__lte=F('min_stock'))


class Product(models.Model):
    """
    A stocked item, optionally owned by a Business.

    Rules:
    - current_stock is never negative
    - current_stock only changes through StockMovement (see ledger service)
    - sku is stored upper-cased
    - business is a weak reference: relation + lookup, never ownership
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_('Name'),
    )
    sku = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('SKU'),
        help_text=_('Stored upper-case'),
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Description'),
    )
    category = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name=_('Category'),
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name=_('Unit price'),
    )
    current_stock = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Current stock'),
    )
    min_stock = models.PositiveIntegerField(
        default=default_min_stock,
        verbose_name=_('Minimum stock'),
        help_text=_('Alert threshold'),
    )
    business = models.ForeignKey(
        'bizstock.Business',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='products',
        verbose_name=_('Business'),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Created at'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Updated at'))

    objects = ProductQuerySet.as_manager()

    class Meta:
        verbose_name = _('Product')
        verbose_name_plural = _('Products')
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['business', 'category'], name='bizstock_product_biz_cat_idx'),
        ]

    # ══════════════════════════════════════════════════════════════
    # PROPERTIES
    # ══════════════════════════════════════════════════════════════

    @property
    def business_name(self) -> str:
        """Owning business name, joined at read time."""
        from bizstock.conf import bizstock_settings

        if hasattr(self, 'joined_business_name'):
            name = self.joined_business_name
        elif self.business_id is not None:
            from bizstock.models.business import Business
            name = Business.objects.filter(
                pk=self.business_id
            ).values_list('name', flat=True).first()
        else:
            name = None
        return name or bizstock_settings.UNKNOWN_BUSINESS_NAME

    @property
    def stock_status(self):
        """Four-way status (OUT_OF_STOCK / CRITICAL / WARNING / NORMAL)."""
        from bizstock.status import classify
        return classify(self.current_stock, self.min_stock)

    @property
    def stock_level(self):
        """Three-way status (OUT_OF_STOCK / LOW_STOCK / IN_STOCK)."""
        from bizstock.status import stock_level
        return stock_level(self.current_stock, self.min_stock)

    @property
    def stock_value(self) -> Decimal:
        """price × current_stock."""
        return self.price * self.current_stock

    # ══════════════════════════════════════════════════════════════
    # METHODS
    # ══════════════════════════════════════════════════════════════

    def save(self, *args, **kwargs):
        """Save product with the SKU normalized to upper-case."""
        self.sku = (self.sku or '').strip().upper()
        super().save(*args, **kwargs)

    def ledger_balance(self) -> int:
        """
        Sum of all movement deltas.

        Equals current_stock while stock only changes through the ledger.
        Use for integrity audits.
        """
        return self.movements.aggregate(
            t=Coalesce(Sum('change_amount'), 0)
        )['t']

    def __str__(self) -> str:
        return f"{self.name} ({self.sku})"
