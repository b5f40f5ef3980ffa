"""
Exceptions for Bizstock.

Every error is an InventoryError with a structured code for programmatic
handling. Subclasses narrow the taxonomy so callers can catch by kind:

    try:
        inventory.adjust_stock(product.pk, 12, 'out')
    except InsufficientStockError as e:
        print(f"Only {e.available} left")
"""

from decimal import Decimal
from typing import Any


class InventoryError(Exception):
    """
    Structured exception for inventory operations.

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    default_code = 'INVENTORY_ERROR'

    _default_messages = {
        'INVENTORY_ERROR': 'Inventory operation failed',
        'VALIDATION_FAILED': 'Invalid input',
        'REQUIRED_FIELD': 'Please fill in all required fields',
        'INVALID_DIRECTION': 'Stock direction must be "in" or "out"',
        'INVALID_FILTER': 'Unknown filter value',
        'REASON_REQUIRED': 'A reason is required',
        'NOT_FOUND': 'Record not found',
        'INVALID_QUANTITY': 'Please enter a valid quantity',
        'INSUFFICIENT_STOCK': 'Insufficient stock',
        'BACKEND_ERROR': 'Data backend request failed',
    }

    def __init__(self, code: str | None = None, message: str | None = None, **data):
        self.code = code or self.default_code
        self.message = message or self._default_messages.get(self.code, self.code)
        self.data = data
        super().__init__(self.message)

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: str(v) if isinstance(v, Decimal) else v
                for k, v in self.data.items()
            }
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


class ValidationError(InventoryError):
    """Missing or malformed input, raised before any write happens."""

    default_code = 'VALIDATION_FAILED'

    @property
    def fields(self) -> list[str]:
        """Shortcut for data['fields']."""
        return self.data.get('fields', [])


class NotFoundError(InventoryError):
    """The operation targets an entity that does not exist."""

    default_code = 'NOT_FOUND'


class InvalidQuantityError(InventoryError):
    """Stock quantity is not a positive integer."""

    default_code = 'INVALID_QUANTITY'


class InsufficientStockError(InventoryError):
    """A stock-out would take the product below zero."""

    default_code = 'INSUFFICIENT_STOCK'

    @property
    def available(self) -> int:
        """Shortcut for data['available']."""
        return self.data.get('available', 0)

    @property
    def requested(self) -> int:
        """Shortcut for data['requested']."""
        return self.data.get('requested', 0)


class BackendError(InventoryError):
    """The database rejected or failed a request; nothing was applied."""

    default_code = 'BACKEND_ERROR'
