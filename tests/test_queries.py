"""
Tests for catalog queries, dashboard summary and stock alerts.
"""

import logging
from decimal import Decimal

import pytest

from bizstock import NotFoundError
from bizstock.models import StockStatus


pytestmark = pytest.mark.django_db


class TestLookups:

    def test_get_business_has_product_count(self, inventory, grocers, avocados, bread):
        assert inventory.get_business(grocers.pk).product_count == 2

    def test_get_missing_business(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.get_business(999999)

    def test_get_missing_product(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.get_product('abc')

    def test_product_count(self, inventory, techmart, grocers, cable, headphones, avocados):
        assert inventory.product_count(techmart) == 2
        assert inventory.product_count(grocers.pk) == 1

    def test_list_businesses_newest_first(self, inventory, techmart, grocers):
        assert list(inventory.list_businesses()) == [grocers, techmart]

    def test_list_businesses_is_ordered(self, inventory, techmart, grocers):
        """The product-count GROUP BY must not lose the newest-first order."""
        shop = inventory.create_business(name='Home & Living Co.', contact='+1 555-0321')
        qs = inventory.list_businesses()

        assert qs.ordered
        assert list(qs) == [shop, grocers, techmart]
        assert list(inventory.list_businesses('e')) == [shop, grocers, techmart]

    def test_list_businesses_search(self, inventory, techmart, grocers):
        assert list(inventory.list_businesses('electro')) == [techmart]

    def test_list_products_joins_business(self, inventory, avocados):
        product = inventory.list_products()[0]

        assert product.joined_business_name == 'Fresh Grocers'


class TestStockHistory:

    def test_newest_first(self, inventory, cable):
        inventory.adjust_stock(cable.pk, 12, 'out', 'Customer orders')
        inventory.adjust_stock(cable.pk, 4, 'in', 'Return')

        history = inventory.stock_history()
        assert [m.reason for m in history] == ['Return', 'Customer orders', 'Opening stock']
        assert history[0].product_name == 'USB-C Charging Cable 2m'
        assert history[0].product_sku == 'TECH-USB-002'

    def test_limit(self, inventory, cable):
        for _ in range(3):
            inventory.adjust_stock(cable.pk, 1, 'in')

        assert len(inventory.stock_history(limit=2)) == 2

    def test_zero_limit(self, inventory, cable):
        inventory.adjust_stock(cable.pk, 1, 'in')

        assert inventory.stock_history(limit=0) == []

    def test_default_limit_from_settings(self, inventory, cable, settings):
        settings.BIZSTOCK = {'HISTORY_LIMIT': 1}
        inventory.adjust_stock(cable.pk, 1, 'in')

        assert len(inventory.stock_history()) == 1

    def test_for_one_product(self, inventory, cable, bread):
        history = inventory.stock_history(product=bread)

        assert [m.product_id for m in history] == [bread.pk]

    def test_recent_activity(self, inventory, cable):
        for _ in range(7):
            inventory.adjust_stock(cable.pk, 1, 'in')

        assert len(inventory.recent_activity()) == 5


class TestSummary:

    def test_empty(self, inventory):
        summary = inventory.summary()

        assert summary.total_products == 0
        assert summary.total_items == 0
        assert summary.inventory_value == Decimal('0')

    def test_figures(self, inventory, cable, headphones, bread, empty_product):
        summary = inventory.summary()

        assert summary.total_products == 4
        assert summary.total_businesses == 2
        # cable (20/20), bread (5/15), empty (0/10)
        assert summary.low_stock_count == 3
        assert summary.total_items == 50
        assert summary.inventory_value == (
            Decimal('14.99') * 20 + Decimal('79.99') * 25 + Decimal('4.49') * 5
        )

    def test_reflects_adjustments(self, inventory, headphones):
        inventory.adjust_stock(headphones.pk, 20, 'in')

        assert inventory.summary().total_items == 45


class TestStockAlerts:

    def test_buckets(self, inventory, cable, headphones, avocados, bread, empty_product):
        alerts = inventory.stock_alerts()

        assert alerts.out_of_stock == [empty_product]
        assert alerts.critical == [bread]
        assert alerts.warning == [cable]
        assert len(alerts) == 3

    def test_iteration_lowest_first(self, inventory, cable, bread, empty_product):
        assert [p.current_stock for p in inventory.stock_alerts()] == [0, 5, 20]

    def test_bucket_by_status(self, inventory, bread):
        alerts = inventory.stock_alerts()

        assert alerts.bucket(StockStatus.CRITICAL) == [bread]
        assert alerts.bucket(StockStatus.NORMAL) == []

    def test_for_business(self, inventory, techmart, cable, bread):
        alerts = inventory.stock_alerts(business=techmart)

        assert list(alerts) == [cable]

    def test_logs_each_alert(self, inventory, bread, caplog):
        with caplog.at_level(logging.WARNING, logger='bizstock'):
            inventory.stock_alerts()

        records = [r for r in caplog.records if r.getMessage() == 'inventory.alert.triggered']
        assert len(records) == 1
        assert records[0].sku == 'GROC-BRD-002'
        assert records[0].status == 'critical'

    def test_restock_clears_alert(self, inventory, bread):
        inventory.adjust_stock(bread.pk, 20, 'in')

        assert len(inventory.stock_alerts()) == 0
