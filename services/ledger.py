"""
Stock ledger — state-changing stock operations (adjust, recount).

All methods use transaction.atomic() with select_for_update() on the
product row. The stock write and the movement insert happen in the same
StockMovement.save(), so neither is ever visible without the other.
"""

import logging
from dataclasses import dataclass

from django.db import transaction

from bizstock.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    NotFoundError,
    ValidationError,
)
from bizstock.models.enums import ChangeType
from bizstock.models.movement import StockMovement
from bizstock.models.product import MAX_STOCK, Product
from bizstock.services.backend import backend_errors
from bizstock.signals import notify_changed

logger = logging.getLogger('bizstock')

DEFAULT_REASONS = {
    ChangeType.IN: 'Stock added',
    ChangeType.OUT: 'Stock removed',
}


@dataclass(frozen=True)
class StockAdjustment:
    """Outcome of adjust_stock()."""

    previous_stock: int
    new_stock: int
    movement: StockMovement

    @property
    def delta(self) -> int:
        return self.new_stock - self.previous_stock


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class StockLedger:
    """Stock movement methods."""

    @classmethod
    def adjust_stock(cls, product_id, quantity: int, direction: str,
                     reason: str | None = None) -> StockAdjustment:
        """
        Move stock in or out of a product.

        Args:
            product_id: Product primary key
            quantity: Positive number of units
            direction: 'in' or 'out'
            reason: Free text; defaults to "Stock added" / "Stock removed"

        Returns:
            StockAdjustment(previous_stock, new_stock, movement)

        Raises:
            InvalidQuantityError: If quantity is not a positive integer, or
                stock would exceed MAX_STOCK
            ValidationError: If reason is given but is not text
            ValidationError('INVALID_DIRECTION'): If direction is not in/out
            NotFoundError: If the product doesn't exist
            InsufficientStockError: If an 'out' exceeds current stock
            BackendError: If the database fails; nothing is applied

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on Product
            - Checks stock after lock
        """
        if not _is_count(quantity) or not 0 < quantity <= MAX_STOCK:
            raise InvalidQuantityError(requested=quantity)

        try:
            direction = ChangeType(direction)
        except ValueError:
            raise ValidationError('INVALID_DIRECTION', direction=direction)

        if reason is not None and not isinstance(reason, str):
            raise ValidationError('VALIDATION_FAILED', 'Reason must be text', fields=['reason'])
        reason = (reason or '').strip() or DEFAULT_REASONS[direction]

        with backend_errors('adjust_stock', product_id=product_id):
            with transaction.atomic():
                product = cls._lock_product(product_id)
                previous = product.current_stock

                if direction == ChangeType.OUT and quantity > previous:
                    raise InsufficientStockError(
                        available=previous,
                        requested=quantity,
                        product_id=product.pk,
                    )
                if direction == ChangeType.IN and previous + quantity > MAX_STOCK:
                    raise InvalidQuantityError(
                        requested=quantity,
                        available=previous,
                        product_id=product.pk,
                    )

                delta = quantity if direction == ChangeType.IN else -quantity
                movement = StockMovement.objects.create(
                    product=product,
                    change_type=direction,
                    change_amount=delta,
                    previous_stock=previous,
                    new_stock=previous + delta,
                    reason=reason,
                )
                notify_changed(Product, 'products', 'adjusted', product.pk)
                notify_changed(StockMovement, 'stock_history', 'created', movement.pk)

        logger.info(
            "inventory.stock.adjust",
            extra={
                "product_id": movement.product_id,
                "delta": delta,
                "previous_stock": movement.previous_stock,
                "new_stock": movement.new_stock,
                "reason": reason,
            },
        )
        return StockAdjustment(
            previous_stock=movement.previous_stock,
            new_stock=movement.new_stock,
            movement=movement,
        )

    @classmethod
    def recount(cls, product_id, new_quantity: int, reason: str) -> StockMovement | None:
        """
        Inventory count correction.

        Calculates the delta automatically: new_quantity - current_stock,
        and records it as an in/out movement.

        Returns:
            The movement, or None when the count already matches

        Raises:
            ValidationError('REASON_REQUIRED'): If reason is empty or not text
            InvalidQuantityError: If new_quantity is negative, above MAX_STOCK or not an integer
            NotFoundError: If the product doesn't exist
        """
        if not isinstance(reason, str) or not reason.strip():
            raise ValidationError('REASON_REQUIRED')
        if not _is_count(new_quantity) or not 0 <= new_quantity <= MAX_STOCK:
            raise InvalidQuantityError(requested=new_quantity)

        with backend_errors('recount', product_id=product_id):
            with transaction.atomic():
                product = cls._lock_product(product_id)
                delta = new_quantity - product.current_stock

                if delta == 0:
                    return None

                movement = StockMovement.objects.create(
                    product=product,
                    change_type=ChangeType.IN if delta > 0 else ChangeType.OUT,
                    change_amount=delta,
                    previous_stock=product.current_stock,
                    new_stock=new_quantity,
                    reason=f"Recount: {reason.strip()}",
                )
                notify_changed(Product, 'products', 'adjusted', product.pk)
                notify_changed(StockMovement, 'stock_history', 'created', movement.pk)

        logger.info(
            "inventory.stock.recount",
            extra={
                "product_id": movement.product_id,
                "delta": delta,
                "reason": reason,
            },
        )
        return movement

    @classmethod
    def _lock_product(cls, product_id) -> Product:
        try:
            return Product.objects.select_for_update().get(pk=product_id)
        except (Product.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(model='Product', pk=product_id)
