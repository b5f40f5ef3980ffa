"""
Entity mutations — create, update and delete businesses and products.

All methods validate before writing, run under transaction.atomic()
and announce the change with inventory_changed once committed.
"""

import logging
from decimal import Decimal, InvalidOperation

from django.db import transaction

from bizstock.exceptions import InvalidQuantityError, NotFoundError, ValidationError
from bizstock.models.business import Business
from bizstock.models.enums import ChangeType
from bizstock.models.movement import StockMovement
from bizstock.models.product import MAX_STOCK, Product, default_min_stock
from bizstock.services.backend import backend_errors
from bizstock.signals import notify_changed

logger = logging.getLogger('bizstock')

OPENING_STOCK_REASON = 'Opening stock'


def _missing(**values) -> list[str]:
    """Names of values that are None or blank."""
    return [
        name for name, value in values.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]


def _require(**values) -> None:
    missing = _missing(**values)
    if missing:
        raise ValidationError('REQUIRED_FIELD', fields=missing)


def _as_price(value) -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError('VALIDATION_FAILED', 'Price must be a number', fields=['price'])
    if not price.is_finite() or price < 0:
        raise ValidationError('VALIDATION_FAILED', 'Price cannot be negative', fields=['price'])
    return price


def _as_threshold(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_STOCK:
        raise ValidationError(
            'VALIDATION_FAILED', 'Minimum stock must be a non-negative integer',
            fields=['min_stock'],
        )
    return value


class EntityMutations:
    """Business and product CRUD methods."""

    BUSINESS_FIELDS = frozenset({'name', 'owner', 'contact', 'category', 'address'})
    PRODUCT_FIELDS = frozenset({
        'name', 'sku', 'description', 'category', 'price', 'min_stock', 'business',
    })

    # ══════════════════════════════════════════════════════════════
    # BUSINESSES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_business(cls, name: str, contact: str, owner: str = '',
                        category: str = '', address: str = '') -> Business:
        """
        Register a business.

        Raises:
            ValidationError('REQUIRED_FIELD'): If name or contact is blank
            BackendError: If the database rejects the insert
        """
        _require(name=name, contact=contact)

        with backend_errors('create_business'):
            with transaction.atomic():
                business = Business.objects.create(
                    name=name.strip(),
                    contact=contact.strip(),
                    owner=(owner or '').strip(),
                    category=(category or '').strip(),
                    address=(address or '').strip(),
                )
                notify_changed(Business, 'businesses', 'created', business.pk)

        logger.info(
            "inventory.business.create",
            extra={"business_id": business.pk, "business_name": business.name},
        )
        return business

    @classmethod
    def update_business(cls, business_id, **updates) -> Business:
        """
        Edit a business.

        Raises:
            NotFoundError: If the business doesn't exist
            ValidationError: Unknown field, or name/contact blanked
        """
        cls._reject_unknown(updates, cls.BUSINESS_FIELDS)
        _require(**{k: updates[k] for k in ('name', 'contact') if k in updates})

        with backend_errors('update_business', business_id=business_id):
            with transaction.atomic():
                business = cls._get_for_update(Business, business_id)
                for field, value in updates.items():
                    setattr(business, field, (value or '').strip())
                business.save()
                notify_changed(Business, 'businesses', 'updated', business.pk)

        logger.info(
            "inventory.business.update",
            extra={"business_id": business.pk, "fields": sorted(updates)},
        )
        return business

    @classmethod
    def delete_business(cls, business_id) -> None:
        """
        Delete a business row.

        Only the business is deleted. Products referencing it are left
        to the database (no constraint is declared), and display the
        unknown-business label from then on.

        Raises:
            NotFoundError: If the business doesn't exist
        """
        with backend_errors('delete_business', business_id=business_id):
            with transaction.atomic():
                business = cls._get_for_update(Business, business_id)
                pk = business.pk
                business.delete()
                notify_changed(Business, 'businesses', 'deleted', pk)

        logger.info("inventory.business.delete", extra={"business_id": pk})

    # ══════════════════════════════════════════════════════════════
    # PRODUCTS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_product(cls, name: str, sku: str, business=None, category: str = '',
                       price=Decimal('0'), current_stock: int = 0,
                       min_stock: int | None = None, description: str = '') -> Product:
        """
        Register a product.

        Opening stock is recorded as an 'in' movement, so the ledger
        balance matches current_stock from the start.

        Args:
            business: Business instance, id, or None

        Raises:
            ValidationError('REQUIRED_FIELD'): If name or sku is blank
            ValidationError: Negative price or threshold
            InvalidQuantityError: Negative, oversized or non-integer opening stock
            NotFoundError: If business is given but doesn't exist
        """
        _require(name=name, sku=sku)
        price = _as_price(price)
        min_stock = default_min_stock() if min_stock is None else _as_threshold(min_stock)
        if (isinstance(current_stock, bool) or not isinstance(current_stock, int)
                or not 0 <= current_stock <= MAX_STOCK):
            raise InvalidQuantityError(requested=current_stock)

        business_id = cls._resolve_business(business)

        with backend_errors('create_product'):
            with transaction.atomic():
                product = Product.objects.create(
                    name=name.strip(),
                    sku=sku,
                    business_id=business_id,
                    category=(category or '').strip(),
                    price=price,
                    current_stock=0,
                    min_stock=min_stock,
                    description=description or '',
                )
                if current_stock > 0:
                    StockMovement.objects.create(
                        product=product,
                        change_type=ChangeType.IN,
                        change_amount=current_stock,
                        previous_stock=0,
                        new_stock=current_stock,
                        reason=OPENING_STOCK_REASON,
                    )
                    product.refresh_from_db()
                notify_changed(Product, 'products', 'created', product.pk)

        logger.info(
            "inventory.product.create",
            extra={
                "product_id": product.pk,
                "sku": product.sku,
                "business_id": business_id,
                "opening_stock": current_stock,
            },
        )
        return product

    @classmethod
    def update_product(cls, product_id, **updates) -> Product:
        """
        Edit product details.

        current_stock is not editable here: stock only changes through
        adjust_stock() or recount(), which keep the movement trail.

        Raises:
            NotFoundError: If the product (or a new business) doesn't exist
            ValidationError: Unknown field, blank name/sku, bad price or threshold
        """
        if 'current_stock' in updates:
            raise ValidationError(
                'VALIDATION_FAILED',
                'Stock changes go through adjust_stock() or recount()',
                fields=['current_stock'],
            )
        if 'business_id' in updates:
            updates['business'] = updates.pop('business_id')
        cls._reject_unknown(updates, cls.PRODUCT_FIELDS)
        _require(**{k: updates[k] for k in ('name', 'sku') if k in updates})

        if 'price' in updates:
            updates['price'] = _as_price(updates['price'])
        if 'min_stock' in updates:
            updates['min_stock'] = _as_threshold(updates['min_stock'])
        if 'business' in updates:
            updates['business_id'] = cls._resolve_business(updates.pop('business'))
        for field in ('name', 'category'):
            if field in updates:
                updates[field] = (updates[field] or '').strip()
        if 'description' in updates:
            updates['description'] = updates['description'] or ''

        with backend_errors('update_product', product_id=product_id):
            with transaction.atomic():
                product = cls._get_for_update(Product, product_id)
                for field, value in updates.items():
                    setattr(product, field, value)
                product.save()
                notify_changed(Product, 'products', 'updated', product.pk)

        logger.info(
            "inventory.product.update",
            extra={"product_id": product.pk, "fields": sorted(updates)},
        )
        return product

    @classmethod
    def delete_product(cls, product_id) -> None:
        """
        Delete a product row.

        Its stock movements are kept as audit trail.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        with backend_errors('delete_product', product_id=product_id):
            with transaction.atomic():
                product = cls._get_for_update(Product, product_id)
                pk = product.pk
                product.delete()
                notify_changed(Product, 'products', 'deleted', pk)

        logger.info("inventory.product.delete", extra={"product_id": pk})

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def _get_for_update(cls, model, pk):
        """Fetch and lock a row, or raise NotFoundError."""
        try:
            return model.objects.select_for_update().get(pk=pk)
        except (model.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(model=model.__name__, pk=pk)

    @classmethod
    def _resolve_business(cls, business):
        """Business instance or id → existing id (None passes through)."""
        if business is None or business == '':
            return None
        business_id = getattr(business, 'pk', business)
        try:
            exists = Business.objects.filter(pk=business_id).exists()
        except (ValueError, TypeError):
            exists = False
        if not exists:
            raise NotFoundError(model='Business', pk=business_id)
        return business_id

    @classmethod
    def _reject_unknown(cls, updates: dict, allowed: frozenset) -> None:
        unknown = sorted(set(updates) - allowed)
        if unknown:
            raise ValidationError('VALIDATION_FAILED', 'Unknown fields', fields=unknown)
