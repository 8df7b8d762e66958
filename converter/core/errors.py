"""Error types and FastAPI exception handlers.

Three kinds of failure reach the user, all terminal for the current attempt:
    - local validation (bad amount, missing selection); no network call made
    - transport (request did not complete, non-2xx status, unreadable body)
    - provider (2xx response whose body reports a failure)
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
import logging
from typing import Optional

logger = logging.getLogger("converter.errors")


class ConverterError(Exception):
    """Base class for errors raised by the converter services."""


class ConversionValidationError(ConverterError):
    pass


class InvalidAmountError(ConversionValidationError):
    pass


class NonPositiveAmountError(ConversionValidationError):
    pass


class MissingCurrencyError(ConversionValidationError):
    pass


class RateFetchError(ConverterError):
    pass


class TransportError(RateFetchError):
    pass


class ProviderError(RateFetchError):
    def __init__(self, error_type: str):
        super().__init__(error_type)
        self.error_type = error_type


class ConversionFailedError(ConverterError):
    """Raised by the orchestrator when a conversion cannot be completed.

    cause is the rate lookup error, or None when the rate arrived but the
    result could not be represented.
    """

    def __init__(self, message: str, cause: Optional[RateFetchError] = None):
        super().__init__(message)
        self.cause = cause


def not_found_handler(request: Request, exc):  # type: ignore
    if getattr(exc, "status_code", 404) != 404:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "http_error", "detail": exc.detail},
        )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "not_found",
            "detail": f"No route for {request.method} {request.url.path}",
        },
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": exc.errors(),
        },
    )


def conversion_validation_handler(request: Request, exc: ConversionValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "validation_error", "detail": str(exc)},
    )


def conversion_failed_handler(request: Request, exc: ConversionFailedError):  # type: ignore
    logger.warning("conversion failed: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": "conversion_failed", "detail": str(exc)},
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
