from __future__ import annotations

"""Concrete rate providers and factory.

'ExchangeRateApiProvider' talks to ExchangeRate-API v6 (key embedded in the
URL path). 'StaticRateProvider' answers from fixed USD-based rates so the app
can run offline.
"""
import logging
import math
import urllib.parse
from typing import Any, Callable, Dict, List, Optional

from converter.core.config import Settings
from converter.core.errors import ProviderError, TransportError
from converter.models.constants import DEFAULT_CURRENCIES
from converter.services.http_client import HttpError, get_json

from .base import RateProvider, RateQuote, utc_now_string

logger = logging.getLogger("converter.rates")

UNKNOWN_PROVIDER_ERROR = "Unknown error from API"

# Units of currency per 1 USD
_STATIC_USD_RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 149.5,
    "NGN": 1550.0,
    "CAD": 1.37,
}

_STATIC_AS_OF = "static rates"


class StaticRateProvider(RateProvider):
    name = "static"

    def list_codes(self) -> List[str]:  # type: ignore[override]
        return list(DEFAULT_CURRENCIES)

    def fetch_rate(self, from_currency: str, to_currency: str) -> RateQuote:  # type: ignore[override]
        try:
            base = _STATIC_USD_RATES[from_currency.upper()]
            quote = _STATIC_USD_RATES[to_currency.upper()]
        except KeyError as e:
            raise ProviderError("unsupported-code") from e
        return RateQuote(rate=quote / base, as_of=_STATIC_AS_OF)


class ExchangeRateApiProvider(RateProvider):
    name = "exchangerate-api"

    def __init__(self, api_root: str, timeout: Optional[float] = None):
        # api_root is '{base_url}/{api_key}'
        self._api_root = api_root.rstrip("/")
        self._timeout = timeout

    def _get(self, *segments: str, failure: str) -> Dict[str, Any]:
        path = "/".join(urllib.parse.quote(s, safe="") for s in segments)
        url = f"{self._api_root}/{path}"
        try:
            data = get_json(url, timeout=self._timeout)
        except HttpError as e:
            logger.warning("%s: %s", failure, e)
            raise TransportError(failure) from e
        if data.get("result") != "success":
            error_type = data.get("error-type") or UNKNOWN_PROVIDER_ERROR
            logger.warning("provider reported failure for /%s: %s", segments[0], error_type)
            raise ProviderError(str(error_type))
        return data

    def list_codes(self) -> List[str]:  # type: ignore[override]
        data = self._get("codes", failure="Failed to fetch currency codes")
        codes = data.get("supported_codes") or []
        return [str(entry[0]) for entry in codes]

    def fetch_rate(self, from_currency: str, to_currency: str) -> RateQuote:  # type: ignore[override]
        data = self._get(
            "pair", from_currency, to_currency, failure="Failed to fetch exchange rate"
        )
        try:
            rate = float(data["conversion_rate"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError("malformed-response") from e
        if not math.isfinite(rate):
            raise ProviderError("malformed-response")
        as_of = data.get("time_last_update_utc") or utc_now_string()
        return RateQuote(rate=rate, as_of=str(as_of))


_PROVIDER_REGISTRY: Dict[str, Callable[[Settings], RateProvider]] = {
    "static": lambda settings: StaticRateProvider(),
    "exchangerate-api": lambda settings: ExchangeRateApiProvider(
        settings.api_root, timeout=settings.http_timeout_seconds
    ),
}


def make_rate_provider(kind: str, settings: Settings) -> RateProvider:
    factory = _PROVIDER_REGISTRY.get(kind)
    if not factory:
        raise ValueError(f"Unknown rate provider kind '{kind}'")
    return factory(settings)
