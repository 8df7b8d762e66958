"""Application context.

One instance per running application, built in the lifespan hook and
stored on ``app.state``. Handlers receive it through ``get_context`` instead
of reaching for module globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from converter.core.config import Settings
from converter.services.catalog import Catalog, load_catalog
from converter.services.rates import RateProvider, make_rate_provider

logger = logging.getLogger("converter.context")


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    provider: RateProvider
    catalog: Catalog


def build_context(
    settings: Settings, provider: Optional[RateProvider] = None
) -> AppContext:
    provider = provider or make_rate_provider(settings.exchange_rate_provider, settings)
    catalog = load_catalog(provider)
    logger.info(
        "context ready: provider=%s catalog_source=%s codes=%d",
        provider.name,
        catalog.source,
        len(catalog),
    )
    return AppContext(settings=settings, provider=provider, catalog=catalog)


def get_context(request: Request) -> AppContext:
    ctx = getattr(request.app.state, "context", None)
    if ctx is None:
        raise RuntimeError("application context not initialized")
    return ctx
