"""Currency catalog loading.

The catalog is fetched once per application lifetime. Loading never fails
outwardly: any provider problem yields the built-in default list, with a
user-facing warning when the provider reported an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from converter.core.errors import RateFetchError
from converter.models.constants import DEFAULT_CURRENCIES

from .rates.base import RateProvider

logger = logging.getLogger("converter.catalog")

SOURCE_PROVIDER = "provider"
SOURCE_DEFAULT = "default"


@dataclass(frozen=True)
class Catalog:
    codes: Tuple[str, ...]
    source: str = SOURCE_PROVIDER
    warning: Optional[str] = None

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __len__(self) -> int:
        return len(self.codes)


def default_catalog(warning: Optional[str] = None) -> Catalog:
    return Catalog(codes=DEFAULT_CURRENCIES, source=SOURCE_DEFAULT, warning=warning)


def _fallback_warning(cause: object) -> str:
    return f"Failed to load currencies ({cause}). Using default currencies."


def load_catalog(provider: RateProvider) -> Catalog:
    try:
        codes = provider.list_codes()
    except RateFetchError as e:
        logger.warning("currency catalog unavailable, using defaults: %s", e)
        return default_catalog(_fallback_warning(e))
    except Exception as e:  # malformed body or unexpected shape
        logger.exception("currency catalog load failed, using defaults")
        return default_catalog(_fallback_warning(e))

    if not codes:
        logger.info("provider returned no currency codes, using defaults")
        return default_catalog()
    logger.info("loaded %d currency codes from %s", len(codes), provider.name)
    return Catalog(codes=tuple(codes), source=SOURCE_PROVIDER)


__all__ = ["Catalog", "default_catalog", "load_catalog", "SOURCE_DEFAULT", "SOURCE_PROVIDER"]
