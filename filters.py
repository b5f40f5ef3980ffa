"""
Product and business search — pure, order-preserving filters.

Two renditions of the same predicates:
- filter_products() / filter_businesses(): over in-memory sequences
- filter_product_queryset() / filter_business_queryset(): in SQL

Usage:
    from bizstock.filters import ProductFilter, filter_products

    visible = filter_products(products, ProductFilter(text='avocado', stock_status='low-stock'))
    visible = filter_products(products, text='avocado')  # same, keyword form
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import F, Q

from bizstock.exceptions import ValidationError
from bizstock.models.enums import PriceBucket, StockFilter

ALL = 'all'

SORT_KEYS = {
    'name': lambda p: p.name.casefold(),
    'quantity': lambda p: p.current_stock,
    'price': lambda p: p.price,
}


def _choice(enum, value, field: str):
    """Coerce a filter value into its enum; None and '' mean 'all'."""
    if value is None or value == '':
        return enum.ALL
    try:
        return enum(value)
    except ValueError:
        raise ValidationError('INVALID_FILTER', field=field, value=value)


def _is_all(value) -> bool:
    return value is None or value == '' or value == ALL


@dataclass(frozen=True)
class ProductFilter:
    """
    Product finder criteria. All active predicates must hold (AND).

    Attributes:
        text: Case-insensitive substring of name, SKU or description
        business_id: Business pk, or 'all'
        category: Exact, case-sensitive category, or 'all'
        price_bucket: 'all', 'low', 'mid' or 'high'
        stock_status: 'all', 'in-stock' or 'low-stock'
    """

    text: str = ''
    business_id: Any = ALL
    category: str | None = ALL
    price_bucket: str = PriceBucket.ALL
    stock_status: str = StockFilter.ALL

    def __post_init__(self):
        object.__setattr__(self, 'text', self.text or '')
        object.__setattr__(self, 'price_bucket', _choice(PriceBucket, self.price_bucket, 'price_bucket'))
        object.__setattr__(self, 'stock_status', _choice(StockFilter, self.stock_status, 'stock_status'))

    @classmethod
    def from_query(cls, params: Mapping) -> 'ProductFilter':
        """
        Build criteria from query parameters (e.g. request.GET).

        Keys: q, business, category, price, stock
        """
        return cls(
            text=params.get('q', ''),
            business_id=params.get('business', ALL),
            category=params.get('category', ALL),
            price_bucket=params.get('price', PriceBucket.ALL),
            stock_status=params.get('stock', StockFilter.ALL),
        )

    @property
    def active_count(self) -> int:
        """Number of active filters besides the free text."""
        return sum([
            not _is_all(self.business_id),
            not _is_all(self.category),
            self.price_bucket != PriceBucket.ALL,
            self.stock_status != StockFilter.ALL,
        ])

    def cleared(self) -> 'ProductFilter':
        """Same text, every other filter reset to 'all'."""
        return ProductFilter(text=self.text)


def _price_limits() -> tuple[Decimal, Decimal]:
    from bizstock.conf import bizstock_settings
    return Decimal(bizstock_settings.LOW_PRICE_LIMIT), Decimal(bizstock_settings.HIGH_PRICE_LIMIT)


# ══════════════════════════════════════════════════════════════
# PREDICATES
# ══════════════════════════════════════════════════════════════


def matches_text(product, text: str) -> bool:
    """Any of name, SKU, description contains text (case-insensitive)."""
    needle = (text or '').lower()
    return any(
        needle in (value or '').lower()
        for value in (product.name, product.sku, product.description)
    )


def matches_business(product, business_id) -> bool:
    if _is_all(business_id):
        return True
    business_id = getattr(business_id, 'pk', business_id)
    return product.business_id is not None and str(product.business_id) == str(business_id)


def matches_category(product, category) -> bool:
    return _is_all(category) or product.category == category


def price_in_bucket(price, bucket, low_limit=None, high_limit=None) -> bool:
    """
    Is price within the bucket?

    low: price < low_limit
    mid: low_limit <= price < high_limit
    high: price >= high_limit
    """
    bucket = _choice(PriceBucket, bucket, 'price_bucket')
    if bucket == PriceBucket.ALL:
        return True
    if low_limit is None or high_limit is None:
        low_limit, high_limit = _price_limits()
    if bucket == PriceBucket.LOW:
        return price < low_limit
    if bucket == PriceBucket.MID:
        return low_limit <= price < high_limit
    return price >= high_limit


def matches_stock(current_stock: int, min_stock: int, status) -> bool:
    """
    in-stock: current > min
    low-stock: 0 < current <= min (out-of-stock is excluded)
    """
    status = _choice(StockFilter, status, 'stock_status')
    if status == StockFilter.IN_STOCK:
        return current_stock > min_stock
    if status == StockFilter.LOW_STOCK:
        return 0 < current_stock <= min_stock
    return True


def product_matches(product, criteria: ProductFilter, limits=None) -> bool:
    """Does a single product satisfy every active predicate?"""
    low_limit, high_limit = limits or _price_limits()
    return (
        matches_text(product, criteria.text)
        and matches_business(product, criteria.business_id)
        and matches_category(product, criteria.category)
        and price_in_bucket(product.price, criteria.price_bucket, low_limit, high_limit)
        and matches_stock(product.current_stock, product.min_stock, criteria.stock_status)
    )


# ══════════════════════════════════════════════════════════════
# IN-MEMORY
# ══════════════════════════════════════════════════════════════


def filter_products(products: Iterable, criteria: ProductFilter | None = None,
                    **overrides) -> list:
    """
    Visible subset of products, in input order.

    Args:
        products: Any iterable of Product-like objects
        criteria: ProductFilter (None = no filtering)
        **overrides: ProductFilter fields applied on top of criteria

    Returns:
        New list; the input is not modified
    """
    criteria = replace(criteria or ProductFilter(), **overrides)
    limits = _price_limits()
    return [p for p in products if product_matches(p, criteria, limits)]


def filter_businesses(businesses: Iterable, text: str = '') -> list:
    """Businesses whose name or category contains text (case-insensitive)."""
    needle = (text or '').lower()
    return [
        b for b in businesses
        if needle in (b.name or '').lower() or needle in (b.category or '').lower()
    ]


def categories(products: Iterable) -> list[str]:
    """Distinct non-empty categories, in first-seen order."""
    return list(dict.fromkeys(p.category for p in products if p.category))


def sort_products(products: Iterable, key: str = 'name', descending: bool = False) -> list:
    """
    Sorted copy of products by 'name', 'quantity' or 'price'.

    Stable: ties keep their input order.
    """
    try:
        sort_key = SORT_KEYS[key]
    except KeyError:
        raise ValidationError('INVALID_FILTER', field='sort', value=key)
    return sorted(products, key=sort_key, reverse=descending)


# ══════════════════════════════════════════════════════════════
# QUERYSET
# ══════════════════════════════════════════════════════════════


def filter_product_queryset(queryset, criteria: ProductFilter | None = None, **overrides):
    """
    Queryset-level version of filter_products().

    Keeps the queryset's ordering. Non-ASCII case folding follows the
    database's LIKE semantics.
    """
    criteria = replace(criteria or ProductFilter(), **overrides)

    if criteria.text:
        queryset = queryset.filter(
            Q(name__icontains=criteria.text)
            | Q(sku__icontains=criteria.text)
            | Q(description__icontains=criteria.text)
        )

    if not _is_all(criteria.business_id):
        business_id = getattr(criteria.business_id, 'pk', criteria.business_id)
        try:
            queryset = queryset.filter(business_id=business_id)
        except (ValueError, TypeError, DjangoValidationError):
            return queryset.none()

    if not _is_all(criteria.category):
        queryset = queryset.filter(category=criteria.category)

    if criteria.price_bucket != PriceBucket.ALL:
        low_limit, high_limit = _price_limits()
        if criteria.price_bucket == PriceBucket.LOW:
            queryset = queryset.filter(price__lt=low_limit)
        elif criteria.price_bucket == PriceBucket.MID:
            queryset = queryset.filter(price__gte=low_limit, price__lt=high_limit)
        else:
            queryset = queryset.filter(price__gte=high_limit)

    if criteria.stock_status == StockFilter.IN_STOCK:
        queryset = queryset.filter(current_stock__gt=F('min_stock'))
    elif criteria.stock_status == StockFilter.LOW_STOCK:
        queryset = queryset.filter(current_stock__gt=0, current_stock__lte=F('min_stock'))

    return queryset


def filter_business_queryset(queryset, text: str = ''):
    """Queryset-level version of filter_businesses()."""
    text = text or ''
    if not text:
        return queryset
    return queryset.filter(Q(name__icontains=text) | Q(category__icontains=text))

