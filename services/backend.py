"""
Backend error translation.

Every service call that touches the database runs inside
backend_errors(), so callers only ever see the InventoryError taxonomy.
"""

import logging
from contextlib import contextmanager

from django.db import DatabaseError

from bizstock.exceptions import BackendError

logger = logging.getLogger('bizstock')


@contextmanager
def backend_errors(operation: str, **context):
    """
    Re-raise database failures as BackendError.

    The wrapped block must open its own transaction.atomic(), so the
    failed write is rolled back before the error reaches the caller.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.exception(
            "inventory.backend_error",
            extra={"operation": operation, **context},
        )
        raise BackendError(message=str(exc), operation=operation, **context) from exc
