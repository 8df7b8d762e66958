from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from converter.core.context import AppContext, get_context
from converter.core.errors import ConversionFailedError, ConversionValidationError
from converter.services.conversion import ConversionOrchestrator
from converter.services.presentation import ConverterView
from converter.services.selectors import (
    CurrencySelectors,
    apply_defaults,
    populate,
    swap_selections,
)

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _default_selectors(ctx: AppContext) -> CurrencySelectors:
    selectors = CurrencySelectors()
    populate(selectors, ctx.catalog.codes)
    apply_defaults(
        selectors,
        ctx.catalog.codes,
        default_from=ctx.settings.default_from_currency,
        default_to=ctx.settings.default_to_currencies,
    )
    return selectors


def _submitted_selectors(
    ctx: AppContext, from_currency: Optional[str], to_currency: Optional[str]
) -> CurrencySelectors:
    """Selectors reflecting what the form posted; unknown codes stay unselected."""
    selectors = CurrencySelectors()
    populate(selectors, ctx.catalog.codes)
    selectors.from_currency.select(from_currency)
    selectors.to_currency.select(to_currency)
    return selectors


def _render(
    request: Request,
    ctx: AppContext,
    selectors: CurrencySelectors,
    view: ConverterView,
    amount: str = "",
) -> HTMLResponse:
    context: Dict[str, Any] = {
        "app_name": ctx.settings.app_name,
        "version": ctx.settings.version,
        "selectors": selectors,
        "view": view,
        "amount": amount,
    }
    return templates.TemplateResponse(request, "converter.html", context)


@router.get("/ui", response_class=HTMLResponse)
async def ui_home(request: Request, ctx: AppContext = Depends(get_context)):
    view = ConverterView()
    if ctx.catalog.warning:
        view.show_error(ctx.catalog.warning)
    return _render(request, ctx, _default_selectors(ctx), view)


@router.post("/ui/convert", response_class=HTMLResponse)
def ui_convert(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(""),
    to_currency: str = Form(""),
    ctx: AppContext = Depends(get_context),
):
    selectors = _submitted_selectors(ctx, from_currency, to_currency)
    view = ConverterView()
    orchestrator = ConversionOrchestrator(ctx.provider, view)
    try:
        orchestrator.convert(
            amount, selectors.from_currency.value, selectors.to_currency.value
        )
    except (ConversionValidationError, ConversionFailedError):
        # outcome is already on the view's error banner
        pass
    return _render(request, ctx, selectors, view, amount=amount)


@router.post("/ui/swap", response_class=HTMLResponse)
async def ui_swap(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(""),
    to_currency: str = Form(""),
    ctx: AppContext = Depends(get_context),
):
    selectors = _submitted_selectors(ctx, from_currency, to_currency)
    swap_selections(selectors)
    return _render(request, ctx, selectors, ConverterView(), amount=amount)
