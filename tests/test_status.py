"""
Tests for stock-status classification.
"""

from decimal import Decimal

import pytest

from bizstock import classify
from bizstock.models import Product, StockLevel, StockStatus
from bizstock.status import coarse_status, needs_restock, stock_level


class TestClassify:
    """Four-way status."""

    @pytest.mark.parametrize('current, minimum, expected', [
        (0, 10, StockStatus.OUT_OF_STOCK),
        (0, 0, StockStatus.OUT_OF_STOCK),
        (1, 10, StockStatus.CRITICAL),
        (5, 10, StockStatus.CRITICAL),
        (6, 10, StockStatus.WARNING),
        (10, 10, StockStatus.WARNING),
        (11, 10, StockStatus.NORMAL),
        (8, 20, StockStatus.CRITICAL),
        (20, 20, StockStatus.WARNING),
        (7, 15, StockStatus.CRITICAL),
        (8, 15, StockStatus.WARNING),
        (5, 0, StockStatus.NORMAL),
    ])
    def test_thresholds(self, current, minimum, expected):
        assert classify(current, minimum) == expected

    def test_threshold_of_one_is_never_critical(self):
        """With min_stock=1 the product goes from WARNING to OUT_OF_STOCK."""
        assert classify(1, 1) == StockStatus.WARNING
        assert classify(0, 1) == StockStatus.OUT_OF_STOCK

    def test_labels(self):
        assert StockStatus.WARNING.label == 'Low Stock'
        assert StockStatus.NORMAL.label == 'In Stock'


class TestCoarseStatus:
    """Three-way status."""

    def test_critical_and_warning_collapse(self):
        assert coarse_status(StockStatus.CRITICAL) == StockLevel.LOW_STOCK
        assert coarse_status(StockStatus.WARNING) == StockLevel.LOW_STOCK

    def test_out_and_normal_map_through(self):
        assert coarse_status(StockStatus.OUT_OF_STOCK) == StockLevel.OUT_OF_STOCK
        assert coarse_status(StockStatus.NORMAL) == StockLevel.IN_STOCK

    def test_stock_level(self):
        assert stock_level(8, 20) == StockLevel.LOW_STOCK
        assert stock_level(45, 10) == StockLevel.IN_STOCK


class TestNeedsRestock:

    @pytest.mark.parametrize('current, minimum, expected', [
        (0, 10, True),
        (10, 10, True),
        (11, 10, False),
    ])
    def test_needs_restock(self, current, minimum, expected):
        assert needs_restock(current, minimum) is expected


class TestProductProperties:
    """Status helpers on an unsaved product."""

    def test_product_status(self):
        product = Product(name='Cable', sku='X', current_stock=8, min_stock=20, price=Decimal('2.50'))

        assert product.stock_status == StockStatus.CRITICAL
        assert product.stock_level == StockLevel.LOW_STOCK
        assert product.stock_value == Decimal('20.00')
