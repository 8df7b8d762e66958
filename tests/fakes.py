from typing import Dict, List, Optional, Tuple

from converter.services.rates.base import RateProvider, RateQuote


class FakeProvider(RateProvider):
    """In-memory provider recording every call it receives."""

    name = "fake"

    def __init__(
        self,
        codes: Optional[List[str]] = None,
        rates: Optional[Dict[Tuple[str, str], float]] = None,
        as_of: str = "Mon, 19 Oct 2026 00:00:01 +0000",
        codes_error: Optional[Exception] = None,
        rate_error: Optional[Exception] = None,
    ):
        self.codes = codes if codes is not None else ["USD", "EUR", "GBP", "NGN"]
        self.rates = rates or {("USD", "NGN"): 1500.0, ("USD", "EUR"): 0.9}
        self.as_of = as_of
        self.codes_error = codes_error
        self.rate_error = rate_error
        self.code_calls = 0
        self.rate_calls: List[Tuple[str, str]] = []

    def list_codes(self) -> List[str]:
        self.code_calls += 1
        if self.codes_error is not None:
            raise self.codes_error
        return list(self.codes)

    def fetch_rate(self, from_currency: str, to_currency: str) -> RateQuote:
        self.rate_calls.append((from_currency, to_currency))
        if self.rate_error is not None:
            raise self.rate_error
        return RateQuote(rate=self.rates[(from_currency, to_currency)], as_of=self.as_of)
