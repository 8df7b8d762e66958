from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.context import build_context
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import api, health, ui
from .services.rates import RateProvider


def create_app(
    settings_override: Settings | None = None,
    provider_override: RateProvider | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    provider_override: rate provider to use instead of the configured one
    (tests inject fakes here).
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug, secrets=[settings.exchange_api_key])

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Catalog is fetched once per process; the call blocks, so keep it off the loop
        app.state.context = await run_in_threadpool(
            build_context, settings, provider_override
        )
        try:
            yield
        finally:
            logging.getLogger("converter").debug("releasing application context")
            app.state.context = None

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.not_found_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(
        errors.ConversionValidationError, errors.conversion_validation_handler
    )
    app.add_exception_handler(
        errors.ConversionFailedError, errors.conversion_failed_handler
    )
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(ui.router)
    app.include_router(api.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/ui")

    return app


app = create_app()
