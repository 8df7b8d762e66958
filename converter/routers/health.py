from fastapi import APIRouter, Depends

from converter.core.context import AppContext, get_context

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(ctx: AppContext = Depends(get_context)):
    return {
        "status": "ok",
        "version": ctx.settings.version,
        "provider": ctx.provider.name,
        "catalog_source": ctx.catalog.source,
    }
