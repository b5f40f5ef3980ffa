"""
Signals for Bizstock.

inventory_changed fires after a mutation has been committed, so
receivers always observe the new state:

    from bizstock.signals import inventory_changed

    @receiver(inventory_changed)
    def refresh(sender, collection, action, pk, **kwargs):
        cache.delete(f"bizstock:{collection}")

Arguments:
    sender: Model class of the changed row
    collection: 'businesses', 'products' or 'stock_history'
    action: 'created', 'updated', 'deleted' or 'adjusted'
    pk: Primary key of the changed row
"""

from django.db import transaction
from django.dispatch import Signal

inventory_changed = Signal()


def notify_changed(sender, collection: str, action: str, pk) -> None:
    """Send inventory_changed once the current transaction commits."""
    transaction.on_commit(
        lambda: inventory_changed.send(
            sender=sender, collection=collection, action=action, pk=pk,
        )
    )
