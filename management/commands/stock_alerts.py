"""
Management command to list products that need restocking.

Usage:
    python manage.py stock_alerts
    python manage.py stock_alerts --status critical
"""

from django.core.management.base import BaseCommand

from bizstock import inventory
from bizstock.models import StockStatus

ALERT_STATUSES = [StockStatus.OUT_OF_STOCK, StockStatus.CRITICAL, StockStatus.WARNING]


class Command(BaseCommand):
    """Stock alerts report command."""

    help = 'Lists products at or below their minimum stock'

    def add_arguments(self, parser):
        parser.add_argument(
            '--status',
            choices=[s.value for s in ALERT_STATUSES],
            help='Only show one alert level'
        )

    def handle(self, *args, **options):
        alerts = inventory.stock_alerts()
        statuses = [StockStatus(options['status'])] if options['status'] else ALERT_STATUSES

        shown = 0
        for status in statuses:
            for product in alerts.bucket(status):
                self.stdout.write(
                    f'[{status.label}] {product.name} ({product.sku}) '
                    f'{product.current_stock}/{product.min_stock} @ {product.business_name}'
                )
                shown += 1

        if shown:
            self.stdout.write(self.style.WARNING(f'{shown} product(s) need restocking'))
        else:
            self.stdout.write(self.style.SUCCESS('All products are above their minimum stock'))
