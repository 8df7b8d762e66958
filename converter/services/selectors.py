"""Currency dropdown models.

A CurrencySelector mirrors an HTML <select>: an ordered list of options and
the selected value. Populating always starts from a clean slate, so calling
it repeatedly is safe.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass
class CurrencySelector:
    name: str
    options: List[str] = field(default_factory=list)
    value: str = ""

    def populate(self, codes: Sequence[str]) -> None:
        self.options = list(codes)
        # Browser default: first option selected
        self.value = self.options[0] if self.options else ""

    def select(self, code: str | None) -> bool:
        """Select code if offered; otherwise leave the selector empty."""
        code = (code or "").strip().upper()
        if code in self.options:
            self.value = code
            return True
        self.value = ""
        return False


@dataclass
class CurrencySelectors:
    from_currency: CurrencySelector = field(
        default_factory=lambda: CurrencySelector("from_currency")
    )
    to_currency: CurrencySelector = field(
        default_factory=lambda: CurrencySelector("to_currency")
    )


def populate(selectors: CurrencySelectors, codes: Sequence[str]) -> None:
    selectors.from_currency.populate(codes)
    selectors.to_currency.populate(codes)


def apply_defaults(
    selectors: CurrencySelectors,
    codes: Sequence[str],
    default_from: str = "USD",
    default_to: Sequence[str] = ("NGN", "EUR"),
) -> None:
    if default_from in codes:
        selectors.from_currency.value = default_from
    for code in default_to:
        if code in codes:
            selectors.to_currency.value = code
            break


def swap_selections(selectors: CurrencySelectors) -> None:
    src, dst = selectors.from_currency, selectors.to_currency
    src.value, dst.value = dst.value, src.value


__all__ = [
    "CurrencySelector",
    "CurrencySelectors",
    "populate",
    "apply_defaults",
    "swap_selections",
]
