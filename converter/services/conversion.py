from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Union

from converter.core.errors import (
    ConversionFailedError,
    ConversionValidationError,
    InvalidAmountError,
    MissingCurrencyError,
    NonPositiveAmountError,
    RateFetchError,
)

from .presentation import ConverterView
from .rates.base import SupportsFetchRate

"""Conversion orchestration.

Responsibilities:
    - Validate the raw user input (amount, both selections) before any I/O.
    - Short-circuit same-currency conversions with rate 1 and no provider call.
    - Otherwise fetch the pair rate and multiply at full precision; rounding
      happens only when the view formats the result.
    - Route the outcome to the view and keep the busy flag set exactly while
      the provider call is in flight.
"""

logger = logging.getLogger("converter.conversion")

SAME_CURRENCY_AS_OF = "Current rate"

AmountInput = Union[str, float, int, None]

# Plain decimal notation with optional exponent; no underscores, no inf/nan words
_AMOUNT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

RESULT_TOO_LARGE = "result is too large to display"


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    from_currency: str
    to_currency: str


@dataclass(frozen=True)
class ConversionResult:
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float
    as_of: str


def parse_amount(raw: AmountInput) -> float:
    if isinstance(raw, bool):
        raise InvalidAmountError("Please enter a valid amount")
    if isinstance(raw, str):
        raw = raw.strip()
        if not _AMOUNT_RE.fullmatch(raw):
            raise InvalidAmountError("Please enter a valid amount")
    try:
        amount = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise InvalidAmountError("Please enter a valid amount") from e
    if not math.isfinite(amount):
        raise InvalidAmountError("Please enter a valid amount")
    return amount


def build_request(
    amount: AmountInput, from_currency: str | None, to_currency: str | None
) -> ConversionRequest:
    """Validate in order, stopping at the first failure."""
    value = parse_amount(amount)
    if value <= 0:
        raise NonPositiveAmountError("Amount must be greater than 0")
    src = (from_currency or "").strip().upper()
    dst = (to_currency or "").strip().upper()
    if not src or not dst:
        raise MissingCurrencyError("Please select both currencies")
    return ConversionRequest(amount=value, from_currency=src, to_currency=dst)


class ConversionOrchestrator:
    def __init__(self, fetcher: SupportsFetchRate, view: ConverterView):
        self._fetcher = fetcher
        self._view = view

    @property
    def view(self) -> ConverterView:
        return self._view

    def convert(
        self,
        amount: AmountInput,
        from_currency: str | None,
        to_currency: str | None,
    ) -> ConversionResult:
        ticket = self._view.begin()
        try:
            request = build_request(amount, from_currency, to_currency)
        except ConversionValidationError as e:
            logger.info("conversion rejected: %s", e)
            self._view.show_error(str(e), ticket)
            raise

        if request.from_currency == request.to_currency:
            result = ConversionResult(
                amount=request.amount,
                from_currency=request.from_currency,
                to_currency=request.to_currency,
                rate=1.0,
                converted_amount=request.amount,
                as_of=SAME_CURRENCY_AS_OF,
            )
            self._view.show_result(ticket, result)
            return result

        self._view.set_busy(True)
        try:
            quote = self._fetcher.fetch_rate(request.from_currency, request.to_currency)
            converted = request.amount * quote.rate
            if not math.isfinite(converted):
                message = f"Conversion failed: {RESULT_TOO_LARGE}"
                logger.warning(
                    "conversion overflow %s -> %s at %s",
                    request.from_currency,
                    request.to_currency,
                    quote.rate,
                )
                self._view.show_error(message, ticket)
                raise ConversionFailedError(message)
            result = ConversionResult(
                amount=request.amount,
                from_currency=request.from_currency,
                to_currency=request.to_currency,
                rate=quote.rate,
                converted_amount=converted,
                as_of=quote.as_of,
            )
            self._view.show_result(ticket, result)
            logger.info(
                "converted %s -> %s at %s",
                request.from_currency,
                request.to_currency,
                quote.rate,
            )
            return result
        except RateFetchError as e:
            message = f"Conversion failed: {e}"
            self._view.show_error(message, ticket)
            raise ConversionFailedError(message, e) from e
        finally:
            self._view.set_busy(False)


__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "ConversionOrchestrator",
    "build_request",
    "parse_amount",
]
