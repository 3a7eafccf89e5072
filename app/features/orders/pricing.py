from decimal import Decimal, ROUND_HALF_UP
from typing import Dict
from app.config.settings import settings

CENT = Decimal("0.01")

def to_cents(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)

def checkout_totals(subtotal) -> Dict[str, float]:
    """Subtotal plus flat shipping plus tax on the subtotal, rounded to cents."""
    subtotal = to_cents(subtotal)
    shipping = to_cents(settings.SHIPPING_FLAT_RATE)
    tax = to_cents(subtotal * Decimal(str(settings.TAX_RATE)))
    return {
        "subtotal": float(subtotal),
        "shipping": float(shipping),
        "tax": float(tax),
        "total": float(subtotal + shipping + tax),
    }
