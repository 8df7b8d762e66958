"""Money / rounding helpers.

Centralized so the view and the JSON API use identical display rounding.
Rounding is applied for display only; callers keep full precision values.
"""

from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from converter.models.constants import CURRENCY_SYMBOLS

AMOUNT_PLACES = Decimal("0.01")
RATE_PLACES = Decimal("0.000001")


def _quantize(value: float, places: Decimal) -> Decimal:
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    d = Decimal(str(value))
    with localcontext() as ctx:
        # wide enough for the integer part plus the requested places
        ctx.prec = max(28, d.adjusted() + 10)
        return d.quantize(places, rounding=ROUND_HALF_UP)


def format_amount(value: float) -> str:
    return str(_quantize(value, AMOUNT_PLACES))


def format_rate(value: float) -> str:
    return str(_quantize(value, RATE_PLACES))


def currency_symbol(code: str) -> str:
    return CURRENCY_SYMBOLS.get(code, code)


def format_money(value: float, code: str) -> str:
    return f"{currency_symbol(code)}{format_amount(value)} {code}"
