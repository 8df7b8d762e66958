from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from converter.core.context import AppContext, get_context
from converter.models.rates import CatalogOut, ConversionOut
from converter.services.conversion import ConversionOrchestrator
from converter.services.presentation import ConverterView

"""JSON API exposing the same operations as the page.

Endpoints:
    - GET /api/currencies -> catalog loaded at startup
    - GET /api/convert?amount=&from=&to= -> one conversion

Validation failures answer 422 and upstream failures 502 via the handlers
registered in converter.main.
"""

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/currencies", response_model=CatalogOut, summary="List supported currencies")
async def list_currencies(ctx: AppContext = Depends(get_context)) -> CatalogOut:
    catalog = ctx.catalog
    return CatalogOut(codes=list(catalog.codes), source=catalog.source, warning=catalog.warning)


@router.get("/convert", response_model=ConversionOut, summary="Convert an amount")
def convert(
    amount: str = Query("", description="Amount in the source currency"),
    from_currency: str = Query("", alias="from", description="Source currency code"),
    to_currency: str = Query("", alias="to", description="Target currency code"),
    ctx: AppContext = Depends(get_context),
) -> ConversionOut:
    view = ConverterView()
    result = ConversionOrchestrator(ctx.provider, view).convert(
        amount, from_currency, to_currency
    )
    return ConversionOut(
        amount=result.amount,
        from_currency=result.from_currency,
        to_currency=result.to_currency,
        rate=result.rate,
        converted_amount=result.converted_amount,
        as_of=result.as_of,
        display=view.result_text or "",
        rate_display=view.rate_text or "",
    )
