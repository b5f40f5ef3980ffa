"""
Initial migration for Bizstock models.
"""

from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import bizstock.models.product


class Migration(migrations.Migration):
    """Create Bizstock models: Business, Product, StockMovement."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Business',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('owner', models.CharField(blank=True, default='', help_text='Contact person', max_length=200, verbose_name='Owner')),
                ('contact', models.CharField(help_text='Phone number or e-mail', max_length=200, verbose_name='Contact')),
                ('category', models.CharField(blank=True, default='', max_length=100, verbose_name='Category')),
                ('address', models.CharField(blank=True, default='', max_length=255, verbose_name='Address')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
            ],
            options={
                'verbose_name': 'Business',
                'verbose_name_plural': 'Businesses',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('sku', models.CharField(db_index=True, help_text='Stored upper-case', max_length=64, verbose_name='SKU')),
                ('description', models.TextField(blank=True, default='', verbose_name='Description')),
                ('category', models.CharField(blank=True, default='', max_length=100, verbose_name='Category')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))], verbose_name='Unit price')),
                ('current_stock', models.PositiveIntegerField(default=0, verbose_name='Current stock')),
                ('min_stock', models.PositiveIntegerField(default=bizstock.models.product.default_min_stock, help_text='Alert threshold', verbose_name='Minimum stock')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('business', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='products', to='bizstock.business', verbose_name='Business')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['business', 'category'], name='bizstock_product_biz_cat_idx')],
            },
        ),
        migrations.CreateModel(
            name='StockMovement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('change_type', models.CharField(choices=[('in', 'Stock in'), ('out', 'Stock out')], max_length=3, verbose_name='Type')),
                ('change_amount', models.IntegerField(help_text='Positive = in, negative = out', verbose_name='Change')),
                ('previous_stock', models.PositiveIntegerField(verbose_name='Previous stock')),
                ('new_stock', models.PositiveIntegerField(verbose_name='New stock')),
                ('reason', models.CharField(blank=True, default='', help_text='E.g. "New shipment received", "Customer orders"', max_length=255, verbose_name='Reason')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Created at')),
                ('product', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='movements', to='bizstock.product', verbose_name='Product')),
            ],
            options={
                'verbose_name': 'Stock movement',
                'verbose_name_plural': 'Stock movements',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['product', 'created_at'], name='bizstock_move_product_ts_idx')],
            },
        ),
    ]
