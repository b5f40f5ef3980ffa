"""
Management command to load the demo catalogue.

Usage:
    python manage.py seed_inventory
    python manage.py seed_inventory --dry-run

Stock history is replayed through the ledger, so every product's
movements add up to its current stock.
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from bizstock import inventory
from bizstock.models import Business

BUSINESSES = [
    {'name': 'TechMart Electronics', 'owner': 'Ravi Menon', 'contact': 'contact@techmart.com',
     'category': 'Electronics', 'address': '123 Main Street, Downtown'},
    {'name': 'Fresh Grocers', 'owner': 'Ana Souza', 'contact': '+1 555-0456',
     'category': 'Grocery', 'address': '456 Oak Avenue, Westside'},
    {'name': 'Fashion Forward', 'owner': 'Lena Park', 'contact': 'info@fashionforward.com',
     'category': 'Clothing', 'address': '789 Style Blvd, Mall District'},
    {'name': 'Home & Living Co.', 'owner': 'Sam Okafor', 'contact': '+1 555-0321',
     'category': 'Home & Garden', 'address': '321 Garden Lane, Suburbia'},
]

# (business, name, sku, category, price, opening stock, min stock, description)
PRODUCTS = [
    ('TechMart Electronics', 'Wireless Bluetooth Headphones', 'TECH-WBH-001', 'Electronics',
     '79.99', 25, 10, 'Premium wireless headphones with noise cancellation'),
    ('TechMart Electronics', 'USB-C Charging Cable 2m', 'TECH-USB-002', 'Electronics',
     '14.99', 20, 20, 'Fast charging USB-C cable, braided nylon'),
    ('Fresh Grocers', 'Organic Avocados (Pack of 4)', 'GROC-AVO-001', 'Grocery',
     '6.99', 120, 30, 'Fresh organic avocados, ready to eat'),
    ('Fresh Grocers', 'Whole Grain Bread', 'GROC-BRD-002', 'Grocery',
     '4.49', 15, 15, 'Freshly baked whole grain bread'),
    ('Fashion Forward', 'Summer Floral Dress', 'FASH-DRS-001', 'Clothing',
     '49.99', 25, 8, 'Light and breezy summer dress with floral print'),
    ('Fashion Forward', 'Classic Denim Jacket', 'FASH-JKT-002', 'Clothing',
     '89.99', 3, 5, 'Timeless denim jacket for all seasons'),
    ('Home & Living Co.', 'Indoor Plant Pot Set', 'HOME-POT-001', 'Home & Garden',
     '24.99', 50, 12, 'Set of 3 ceramic plant pots in various sizes'),
    ('Home & Living Co.', 'Garden Tool Set', 'HOME-TLS-002', 'Home & Garden',
     '34.99', 2, 8, '5-piece stainless steel garden tool set'),
]

# (sku, quantity, direction, reason)
MOVEMENTS = [
    ('TECH-WBH-001', 20, 'in', 'New shipment received'),
    ('TECH-USB-002', 12, 'out', 'Customer orders'),
    ('GROC-BRD-002', 10, 'out', 'Daily sales'),
]


class Command(BaseCommand):
    """Seed demo data command."""

    help = 'Loads demo businesses, products and stock movements'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Shows what would be created without writing'
        )

    def handle(self, *args, **options):
        if Business.objects.exists():
            self.stdout.write('Inventory already has data, nothing seeded')
            return

        if options['dry_run']:
            self.stdout.write(
                f'{len(BUSINESSES)} business(es), {len(PRODUCTS)} product(s) and '
                f'{len(MOVEMENTS)} movement(s) would be created'
            )
            return

        with transaction.atomic():
            businesses = {
                data['name']: inventory.create_business(**data)
                for data in BUSINESSES
            }
            products = {}
            for business, name, sku, category, price, stock, min_stock, description in PRODUCTS:
                products[sku] = inventory.create_product(
                    name=name,
                    sku=sku,
                    business=businesses[business],
                    category=category,
                    price=Decimal(price),
                    current_stock=stock,
                    min_stock=min_stock,
                    description=description,
                )
            for sku, quantity, direction, reason in MOVEMENTS:
                inventory.adjust_stock(products[sku].pk, quantity, direction, reason)

        self.stdout.write(
            self.style.SUCCESS(
                f'{len(businesses)} business(es) and {len(products)} product(s) created'
            )
        )
