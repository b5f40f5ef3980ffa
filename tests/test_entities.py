"""
Tests for business and product create / update / delete.
"""

from decimal import Decimal

import pytest
from django.db import connection
from django.test.utils import CaptureQueriesContext

from bizstock import NotFoundError, ValidationError, InvalidQuantityError
from bizstock.models import Business, Product, StockMovement


pytestmark = pytest.mark.django_db


class TestCreateBusiness:

    def test_create(self, inventory):
        shop = inventory.create_business(name='  Fashion Forward ', contact='info@ff.com',
                                         category='Clothing')

        assert shop.pk is not None
        assert shop.name == 'Fashion Forward'
        assert shop.owner == ''
        assert shop.created_at is not None

    @pytest.mark.parametrize('name, contact, missing', [
        ('', 'x@y.z', ['name']),
        ('Shop', '   ', ['contact']),
        (None, None, ['name', 'contact']),
    ])
    def test_required_fields(self, inventory, name, contact, missing):
        with pytest.raises(ValidationError) as exc:
            inventory.create_business(name=name, contact=contact)

        assert exc.value.code == 'REQUIRED_FIELD'
        assert exc.value.message == 'Please fill in all required fields'
        assert exc.value.fields == missing
        assert Business.objects.count() == 0


class TestUpdateBusiness:

    def test_rename_is_visible_on_products(self, inventory, grocers, avocados):
        inventory.update_business(grocers.pk, name='Fresh Grocers Ltd')

        assert inventory.get_product(avocados.pk).business_name == 'Fresh Grocers Ltd'

    def test_unknown_field(self, inventory, grocers):
        with pytest.raises(ValidationError) as exc:
            inventory.update_business(grocers.pk, website='x')

        assert exc.value.fields == ['website']

    def test_blank_contact(self, inventory, grocers):
        with pytest.raises(ValidationError):
            inventory.update_business(grocers.pk, contact='')

    def test_missing_business(self, inventory, db):
        with pytest.raises(NotFoundError):
            inventory.update_business(999999, name='Ghost')


class TestDeleteBusiness:
    """Deleting a business never touches its products."""

    def test_products_survive(self, inventory, grocers, avocados, bread):
        with CaptureQueriesContext(connection) as ctx:
            inventory.delete_business(grocers.pk)

        assert not any('bizstock_product' in q['sql'] and 'DELETE' in q['sql'] for q in ctx.captured_queries)
        assert Product.objects.count() == 2
        assert not Business.objects.filter(pk=grocers.pk).exists()

    def test_orphans_show_unknown_business(self, inventory, grocers, avocados):
        inventory.delete_business(grocers.pk)

        product = inventory.get_product(avocados.pk)
        assert product.business_id == grocers.pk
        assert product.business_name == 'Unknown Business'

        # Without the join too
        assert Product.objects.get(pk=avocados.pk).business_name == 'Unknown Business'

    def test_unknown_label_from_settings(self, inventory, grocers, avocados, settings):
        settings.BIZSTOCK = {'UNKNOWN_BUSINESS_NAME': 'Closed shop'}
        inventory.delete_business(grocers.pk)

        assert inventory.get_product(avocados.pk).business_name == 'Closed shop'

    def test_missing_business(self, inventory, db):
        with pytest.raises(NotFoundError):
            inventory.delete_business(999999)


class TestCreateProduct:

    def test_create(self, inventory, cable, techmart):
        assert cable.sku == 'TECH-USB-002'
        assert cable.business_id == techmart.pk
        assert cable.current_stock == 20
        assert cable.price == Decimal('14.99')

    def test_opening_stock_is_ledgered(self, cable):
        movement = cable.movements.get()

        assert movement.reason == 'Opening stock'
        assert movement.previous_stock == 0
        assert movement.new_stock == 20
        assert cable.ledger_balance() == cable.current_stock

    def test_zero_stock_has_no_movement(self, empty_product):
        assert empty_product.movements.count() == 0
        assert empty_product.ledger_balance() == 0

    def test_default_threshold(self, inventory, settings):
        settings.BIZSTOCK = {'DEFAULT_MIN_STOCK': 3}
        product = inventory.create_product(name='Soap', sku='s-1')

        assert product.min_stock == 3

    def test_without_business(self, inventory):
        product = inventory.create_product(name='Soap', sku='s-1')

        assert product.business_id is None
        assert product.business_name == 'Unknown Business'

    def test_required_fields(self, inventory):
        with pytest.raises(ValidationError) as exc:
            inventory.create_product(name='', sku='')

        assert exc.value.fields == ['name', 'sku']

    def test_negative_price(self, inventory):
        with pytest.raises(ValidationError) as exc:
            inventory.create_product(name='Soap', sku='S', price='-1')

        assert exc.value.fields == ['price']

    def test_negative_opening_stock(self, inventory):
        with pytest.raises(InvalidQuantityError):
            inventory.create_product(name='Soap', sku='S', current_stock=-1)

    def test_oversized_opening_stock(self, inventory):
        with pytest.raises(InvalidQuantityError):
            inventory.create_product(name='Soap', sku='S', current_stock=10 ** 20)

        assert Product.objects.count() == 0

    def test_oversized_threshold(self, inventory):
        with pytest.raises(ValidationError) as exc:
            inventory.create_product(name='Soap', sku='S', min_stock=10 ** 20)

        assert exc.value.fields == ['min_stock']

    def test_unknown_business(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.create_product(name='Soap', sku='S', business=999999)

        assert Product.objects.count() == 0


class TestUpdateProduct:

    def test_update_details(self, inventory, cable):
        product = inventory.update_product(cable.pk, price='12.50', sku=' tech-usb-2m ', min_stock=5)

        assert product.price == Decimal('12.50')
        assert product.sku == 'TECH-USB-2M'
        assert product.min_stock == 5

    def test_move_to_other_business(self, inventory, cable, grocers):
        product = inventory.update_product(cable.pk, business_id=grocers.pk)

        assert product.business_id == grocers.pk

    def test_stock_is_not_editable(self, inventory, cable):
        with pytest.raises(ValidationError) as exc:
            inventory.update_product(cable.pk, current_stock=99)

        assert exc.value.fields == ['current_stock']

    def test_missing_product(self, inventory, db):
        with pytest.raises(NotFoundError):
            inventory.update_product(999999, name='Ghost')


class TestDeleteProduct:

    def test_movements_are_kept(self, inventory, cable):
        inventory.adjust_stock(cable.pk, 2, 'out')
        inventory.delete_product(cable.pk)

        assert not Product.objects.filter(pk=cable.pk).exists()
        assert StockMovement.objects.filter(product_id=cable.pk).count() == 2

    def test_history_of_deleted_product(self, inventory, cable):
        inventory.delete_product(cable.pk)

        movement = inventory.stock_history()[0]
        assert movement.product_id == cable.pk
        assert movement.product_name is None
