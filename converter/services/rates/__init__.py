from .base import RateProvider, RateQuote, SupportsFetchRate
from .providers import ExchangeRateApiProvider, StaticRateProvider, make_rate_provider

__all__ = [
    "RateProvider",
    "RateQuote",
    "SupportsFetchRate",
    "ExchangeRateApiProvider",
    "StaticRateProvider",
    "make_rate_provider",
]
