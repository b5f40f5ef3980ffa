"""
QR codes for product lookup.

The payload is a small JSON object:

    {"id": 42, "sku": "GROC-AVO-001", "name": "Organic Avocados", "business": "Fresh Grocers"}

Scanning (or typing) a code resolves it back to a product: a decoded
payload matches by id or SKU; anything that isn't a JSON object is
treated as a raw SKU or id. SKU comparison ignores case.
"""

import io
import json

import segno

from bizstock.conf import bizstock_settings


def payload(product) -> dict:
    """Structured QR content of a product."""
    return {
        'id': product.pk,
        'sku': product.sku,
        'name': product.name,
        'business': product.business_name,
    }


def encode_payload(product) -> str:
    """Serialize the QR content of a product as JSON text."""
    return json.dumps(payload(product), ensure_ascii=False)


def decode_payload(raw: str) -> dict | None:
    """Parse a scanned string; None if it isn't a JSON object."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def _same_sku(product, sku) -> bool:
    return sku is not None and product.sku.lower() == str(sku).strip().lower()


def _same_id(product, pk) -> bool:
    return pk is not None and str(product.pk) == str(pk).strip()


def lookup_product(raw: str, products=None):
    """
    Resolve scanner input to a product.

    Args:
        raw: Scanned or typed text
        products: Candidates (None = every product, business name joined)

    Returns:
        Product, or None when blank or nothing matches
    """
    raw = (raw or '').strip()
    if not raw:
        return None

    if products is None:
        from bizstock.models.product import Product
        products = Product.objects.with_business_name()

    data = decode_payload(raw)
    if data is not None:
        pk, sku = data.get('id'), data.get('sku')
        return next(
            (p for p in products if _same_id(p, pk) or _same_sku(p, sku)),
            None,
        )

    return next(
        (p for p in products if _same_sku(p, raw) or _same_id(p, raw)),
        None,
    )


def render_svg(product, scale: int | None = None) -> bytes:
    """Render the product's QR code as an SVG document."""
    qrcode = segno.make_qr(encode_payload(product), error='m')
    out = io.BytesIO()
    qrcode.save(
        out,
        kind='svg',
        scale=scale or bizstock_settings.QR_SCALE,
        title=product.name,
    )
    return out.getvalue()


def svg_filename(product) -> str:
    """Download name for a product's QR code."""
    return f"qr-{product.sku}.svg"
