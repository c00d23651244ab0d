# Role: Deterministic parsing helpers for user input. Normalizes currency codes, parses amounts into finite
# Decimals, and reads terminal commands like "10 eur to usd" for the CLI.

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

_AMOUNT = r"([+-]?(?:\d+(?:\.\d*)?|\.\d+))"
_CODE = r"([A-Za-z]{3,})"

# Amounts at or above 10**1000 are rejected as invalid input.
MAX_AMOUNT_EXPONENT = 999


@dataclass(frozen=True)
class CurrencyQuery:
    amount: str
    from_ccy: Optional[str]
    to_ccy: Optional[str]


def normalize_code(code: Any) -> str:
    # Role: " eur " -> "EUR"; anything non-string normalizes to "".
    if not isinstance(code, str):
        return ""
    return code.strip().upper()


def parse_amount(raw: Any) -> Optional[Decimal]:
    """
    Parse a user-supplied amount. Returns None for empty, non-numeric, NaN, infinite or absurdly large input.
    Accepts str, int, float and Decimal (bool is rejected).
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, Decimal)):
        value = Decimal(raw)
    elif isinstance(raw, (float, str)):
        # Key line: floats go through str() so 1.1 stays Decimal("1.1").
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    # Key line: Decimal accepts "NaN" / "Infinity" literals; those are not amounts.
    if not value.is_finite() or value.adjusted() > MAX_AMOUNT_EXPONENT:
        return None
    return value


def parse_currency_pair(text: str) -> Optional[Tuple[str, str]]:
    """
    Parses pair-only patterns:
      - "usd to eur"
      - "EUR/GBP"
      - "usd eur"
    """
    if not text:
        return None

    m = re.fullmatch(rf"\s*{_CODE}\s*(?:to|in|/|-|\s)\s*{_CODE}\s*", text, flags=re.IGNORECASE)
    if not m:
        return None
    return normalize_code(m.group(1)), normalize_code(m.group(2))


def parse_conversion_command(text: str) -> Optional[CurrencyQuery]:
    """
    Parses terminal commands like:
      - "10 eur to usd"
      - "10 eur usd"
      - "10"              (use the currently selected pair)
    """
    if not text:
        return None

    t = text.strip()

    m = re.fullmatch(rf"{_AMOUNT}\s+{_CODE}\s*(?:to|in|/|-)?\s*{_CODE}", t, flags=re.IGNORECASE)
    if m:
        return CurrencyQuery(amount=m.group(1), from_ccy=normalize_code(m.group(2)), to_ccy=normalize_code(m.group(3)))

    m = re.fullmatch(_AMOUNT, t)
    if m:
        return CurrencyQuery(amount=m.group(1), from_ccy=None, to_ccy=None)

    return None
