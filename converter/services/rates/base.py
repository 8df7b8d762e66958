from __future__ import annotations

"""Rate provider abstraction.

A provider answers two questions: which currency codes it supports, and
what the rate is for an ordered pair. Both are single lookups; caching and
retries are deliberately absent.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.utils import formatdate
from typing import List, Protocol


@dataclass(frozen=True)
class RateQuote:
    rate: float
    as_of: str


def utc_now_string() -> str:
    """Current time as an RFC 1123 UTC date, e.g. 'Mon, 19 Oct 2026 13:00:00 GMT'."""
    return formatdate(usegmt=True)


class RateProvider(ABC):
    name: str = "abstract"

    @abstractmethod
    def list_codes(self) -> List[str]:
        """Return supported currency codes in provider order."""
        raise NotImplementedError

    @abstractmethod
    def fetch_rate(self, from_currency: str, to_currency: str) -> RateQuote:
        """Return units of to_currency per 1 unit of from_currency."""
        raise NotImplementedError


class SupportsFetchRate(Protocol):
    def fetch_rate(self, from_currency: str, to_currency: str) -> RateQuote: ...
