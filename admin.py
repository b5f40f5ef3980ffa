"""
Bizstock Admin.

Provides views for day-to-day inspection:
- Business: list + edit, with product count
- Product: list + edit; stock is read-only (changes go through the ledger)
- StockMovement: read-only audit trail
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from bizstock.models import Business, Product, StockMovement


# =========================================================================
# BUSINESS ADMIN
# =========================================================================

@admin.register(Business)
class BusinessAdmin(admin.ModelAdmin):
    """Business admin — editable."""

    list_display = ['name', 'owner', 'contact', 'category', 'product_count_display', 'created_at']
    list_filter = ['category']
    search_fields = ['name', 'category', 'owner']
    readonly_fields = ['created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).with_product_count()

    @admin.display(description=_('Products'), ordering='product_count')
    def product_count_display(self, obj):
        return obj.product_count


# =========================================================================
# PRODUCT ADMIN (stock read-only)
# =========================================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Product admin — stock only changes via the Inventory service."""

    list_display = ['name', 'sku', 'business_display', 'category', 'price',
                    'current_stock', 'min_stock', 'status_display']
    list_filter = ['category', 'business']
    search_fields = ['name', 'sku', 'description']
    readonly_fields = ['current_stock', 'created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).with_business_name()

    @admin.display(description=_('Business'))
    def business_display(self, obj):
        return obj.business_name

    @admin.display(description=_('Status'))
    def status_display(self, obj):
        return obj.stock_status.label


# =========================================================================
# STOCK MOVEMENT ADMIN (read-only audit trail)
# =========================================================================

@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    """StockMovement admin — read-only. Immutable audit trail."""

    list_display = ['created_at', 'product_display', 'change_type', 'change_amount',
                    'previous_stock', 'new_stock', 'reason']
    list_filter = ['change_type', 'created_at']
    search_fields = ['reason']
    readonly_fields = ['product', 'change_type', 'change_amount', 'previous_stock',
                       'new_stock', 'reason', 'created_at']
    date_hierarchy = 'created_at'

    def get_queryset(self, request):
        return super().get_queryset(request).with_product()

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.display(description=_('Product'))
    def product_display(self, obj):
        return obj.product_name or _('Deleted product #%(pk)s') % {'pk': obj.product_id}
