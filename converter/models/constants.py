"""Currency constants shared by the catalog loader and the view."""

from typing import Dict, Tuple

DEFAULT_CURRENCIES: Tuple[str, ...] = ("USD", "EUR", "GBP", "JPY", "NGN", "CAD")

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "NGN": "₦",
    "JPY": "¥",
    "CAD": "$",
}
