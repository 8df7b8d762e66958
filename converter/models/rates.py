from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CatalogOut(BaseModel):
    codes: List[str]
    source: str = Field(..., description="'provider' or 'default'")
    warning: Optional[str] = None


class ConversionOut(BaseModel):
    amount: float = Field(..., gt=0)
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float
    as_of: str
    display: str = Field(..., description="Formatted result line")
    rate_display: str = Field(..., description="Formatted rate annotation")
