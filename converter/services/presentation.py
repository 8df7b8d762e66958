"""Converter view state.

Holds what the page shows: result line, rate annotation, error banner and
the busy indicator. No business logic lives here; the orchestrator decides
what to show and this module only formats and enforces that the result and
the error banner are never visible together.

Each attempt takes a ticket from begin(); outcomes delivered with an older
ticket are dropped, so a slow response can never overwrite a newer one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .money import format_money, format_rate

if TYPE_CHECKING:  # pragma: no cover
    from .conversion import ConversionResult


@dataclass
class ConverterView:
    result_text: Optional[str] = None
    rate_text: Optional[str] = None
    updated_text: Optional[str] = None
    error_text: Optional[str] = None
    busy: bool = False
    attempt: int = 0

    @property
    def result_visible(self) -> bool:
        return self.result_text is not None

    @property
    def error_visible(self) -> bool:
        return self.error_text is not None

    def begin(self) -> int:
        self.clear()
        self.attempt += 1
        return self.attempt

    def clear(self) -> None:
        self.result_text = None
        self.rate_text = None
        self.updated_text = None
        self.error_text = None

    def set_busy(self, flag: bool) -> None:
        self.busy = flag

    def _is_current(self, ticket: Optional[int]) -> bool:
        return ticket is None or ticket == self.attempt

    def show_result(self, ticket: Optional[int], result: "ConversionResult") -> bool:
        if not self._is_current(ticket):
            return False
        self.error_text = None
        self.result_text = (
            f"{format_money(result.amount, result.from_currency)} = "
            f"{format_money(result.converted_amount, result.to_currency)}"
        )
        self.rate_text = rate_annotation(result)
        self.updated_text = f"Rates updated: {result.as_of}"
        return True

    def show_error(self, message: str, ticket: Optional[int] = None) -> bool:
        if not self._is_current(ticket):
            return False
        self.result_text = None
        self.rate_text = None
        self.updated_text = None
        self.error_text = message
        return True


def rate_annotation(result: "ConversionResult") -> str:
    if result.from_currency == result.to_currency:
        return f"1 {result.from_currency} = 1 {result.to_currency}"
    return f"1 {result.from_currency} = {format_rate(result.rate)} {result.to_currency}"


__all__ = ["ConverterView", "rate_annotation"]
