# Role: Pure conversion arithmetic. Works in Decimal so the result is exactly two places ("10.00", never
# "10" or "10.001"), rounded half-up.

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[Decimal, float, int, str]

CENTS = Decimal("0.01")


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # Key line: go through str() so 1.1 becomes Decimal("1.1"), not its binary approximation.
    return Decimal(str(value))


def convert(amount: Number, rate: Number) -> Decimal:
    """Return ``amount * rate`` quantized to 2 decimal places (ROUND_HALF_UP)."""
    a = _to_decimal(amount)
    r = _to_decimal(rate)

    with localcontext() as ctx:
        # Key line: the default 28-digit context cannot hold large amounts at cent precision.
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(r.as_tuple().digits))
        product = a * r
        ctx.prec = max(ctx.prec, product.adjusted() + 3)
        return product.quantize(CENTS, rounding=ROUND_HALF_UP)
