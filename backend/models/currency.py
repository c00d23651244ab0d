# Role: Value types for the conversion domain. All are frozen pydantic models: created once from a provider
# payload or validated user input, never mutated afterwards.

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str


class RateTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_currency: str
    rates: Dict[str, float] = Field(default_factory=dict)
    date: Optional[str] = None

    def lookup(self, target_currency: str) -> Optional[float]:
        # Key line: wire keys are lower-case, but compare case-insensitively anyway.
        wanted = target_currency.strip().lower()
        for code, rate in self.rates.items():
            if code.lower() == wanted:
                return rate
        return None


class ConversionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    base_currency: str
    target_currency: str


class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    base_currency: str
    target_currency: str
    rate: float
    converted_amount: Decimal

    def describe(self) -> str:
        return f"{self.amount} {self.base_currency} = {self.converted_amount} {self.target_currency}"
