"""Money helpers.

All amounts are ``Decimal`` quantized to cents with ``ROUND_HALF_UP``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Optional, Union

from pydantic import Field

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")

Number = Union[Decimal, int, float, str]

# DTO input types sized like the DecimalField columns they are written to.
MoneyInput = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
PercentInput = Annotated[Decimal, Field(max_digits=5, decimal_places=2)]


def to_money(value: Number) -> Decimal:
    """Coerce *value* to a cent-quantized ``Decimal``."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_final_price(price: Number, discount: Optional[Number] = None) -> Decimal:
    """Apply a percentage *discount* to *price*.

    A missing or zero discount leaves the price unchanged.

    Raises:
        ValueError: if the discount falls outside ``[0, 100]`` or the
            price is negative.
    """
    price = Decimal(str(price)) if not isinstance(price, Decimal) else price
    if price < 0:
        raise ValueError("Price cannot be negative.")
    if not discount:
        return to_money(price)

    discount = Decimal(str(discount)) if not isinstance(discount, Decimal) else discount
    if discount < 0 or discount > HUNDRED:
        raise ValueError("Discount must be between 0 and 100.")
    return to_money(price - (price * discount / HUNDRED))
