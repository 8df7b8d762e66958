"""Pydantic response models and currency constants."""

from .constants import DEFAULT_CURRENCIES, CURRENCY_SYMBOLS  # re-export
from .rates import CatalogOut, ConversionOut

__all__ = [
    "DEFAULT_CURRENCIES",
    "CURRENCY_SYMBOLS",
    "CatalogOut",
    "ConversionOut",
]
