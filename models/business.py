"""
Business model — the shops that own products.
"""

from django.db import models
from django.db.models import Count
from django.utils.translation import gettext_lazy as _


class BusinessQuerySet(models.QuerySet):
    """QuerySet with helpers for business listings."""

    def with_product_count(self):
        """
        Annotate each business with the number of products referencing it.

        GROUP BY queries drop Meta.ordering; callers must order explicitly.
        """
        return self.annotate(product_count=Count('products'))


class Business(models.Model):
    """
    A local business registered by the operator.

    A name and a way to reach the owner (contact) are mandatory.
    Deleting a business only removes this row; products that referenced
    it keep their business_id and resolve to the "unknown business" label.

    Examples:
        Business.objects.create(name='Fresh Grocers', contact='+1 555-0456', category='Grocery')
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_('Name'),
    )
    owner = models.CharField(
        max_length=200,
        blank=True,
        default='',
        verbose_name=_('Owner'),
        help_text=_('Contact person'),
    )
    contact = models.CharField(
        max_length=200,
        verbose_name=_('Contact'),
        help_text=_('Phone number or e-mail'),
    )
    category = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name=_('Category'),
    )
    address = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name=_('Address'),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Created at'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Updated at'))

    objects = BusinessQuerySet.as_manager()

    class Meta:
        verbose_name = _('Business')
        verbose_name_plural = _('Businesses')
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:
        return self.name
