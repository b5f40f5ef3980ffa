"""
Pytest fixtures for Bizstock tests.
"""

from decimal import Decimal

import django
import pytest
from django.conf import settings


def pytest_configure():
    """Minimal Django project: the app, admin dependencies, in-memory SQLite."""
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY='bizstock-tests',
        USE_TZ=True,
        DATABASES={
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            }
        },
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'django.contrib.auth',
            'django.contrib.admin',
            'django.contrib.sessions',
            'django.contrib.messages',
            'bizstock',
        ],
        TEMPLATES=[{
            'BACKEND': 'django.template.backends.django.DjangoTemplates',
            'APP_DIRS': True,
            'OPTIONS': {'context_processors': [
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ]},
        }],
        DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
        BIZSTOCK={},
    )
    django.setup()


@pytest.fixture
def inventory():
    """The Inventory facade."""
    from bizstock import inventory
    return inventory


@pytest.fixture
def techmart(db, inventory):
    """Electronics shop."""
    return inventory.create_business(
        name='TechMart Electronics',
        owner='Ravi Menon',
        contact='contact@techmart.com',
        category='Electronics',
        address='123 Main Street, Downtown',
    )


@pytest.fixture
def grocers(db, inventory):
    """Grocery shop."""
    return inventory.create_business(
        name='Fresh Grocers',
        contact='+1 555-0456',
        category='Grocery',
    )


@pytest.fixture
def cable(db, inventory, techmart):
    """20 in stock, threshold 20 (WARNING)."""
    return inventory.create_product(
        name='USB-C Charging Cable 2m',
        sku='tech-usb-002',
        business=techmart,
        category='Electronics',
        price=Decimal('14.99'),
        current_stock=20,
        min_stock=20,
        description='Fast charging USB-C cable, braided nylon',
    )


@pytest.fixture
def headphones(db, inventory, techmart):
    """25 in stock, threshold 10 (NORMAL)."""
    return inventory.create_product(
        name='Wireless Bluetooth Headphones',
        sku='TECH-WBH-001',
        business=techmart,
        category='Electronics',
        price=Decimal('79.99'),
        current_stock=25,
        min_stock=10,
        description='Premium wireless headphones with noise cancellation',
    )


@pytest.fixture
def avocados(db, inventory, grocers):
    """120 in stock, threshold 30 (NORMAL)."""
    return inventory.create_product(
        name='Organic Avocados (Pack of 4)',
        sku='GROC-AVO-001',
        business=grocers,
        category='Grocery',
        price=Decimal('6.99'),
        current_stock=120,
        min_stock=30,
        description='Fresh organic avocados, ready to eat',
    )


@pytest.fixture
def bread(db, inventory, grocers):
    """5 in stock, threshold 15 (CRITICAL)."""
    return inventory.create_product(
        name='Whole Grain Bread',
        sku='GROC-BRD-002',
        business=grocers,
        category='Grocery',
        price=Decimal('4.49'),
        current_stock=5,
        min_stock=15,
        description='Freshly baked whole grain bread',
    )


@pytest.fixture
def empty_product(db, inventory, grocers):
    """Nothing in stock."""
    return inventory.create_product(
        name='Almond Milk',
        sku='GROC-ALM-003',
        business=grocers,
        category='Grocery',
        price=Decimal('3.20'),
        current_stock=0,
        min_stock=10,
    )
