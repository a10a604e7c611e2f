"""
Selling price derivation

The backend stores whatever price the client sends, so this is the single
place the MRP/discount rule lives.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal, str]

def compute_selling_price(
    mrp: Optional[Number],
    discount_percent: Optional[Number] = 0,
    manual_price: Optional[Number] = None
) -> float:
    """
    Derive the selling price of a product

    With an MRP the price is MRP * (1 - discount/100) rounded half-up to a
    whole currency unit. Any entered MRP counts, zero included, so an MRP of
    0 prices the product at 0. Only a missing or blank MRP falls back to the
    manually entered price, returned unchanged.

    Args:
        mrp: Maximum retail price
        discount_percent: Discount in percent (0-100)
        manual_price: Price used when there is no MRP

    Returns:
        Selling price

    Example:
        >>> compute_selling_price(1999, 35)
        1299.0
    """
    if mrp in (None, ""):
        if manual_price in (None, ""):
            return 0.0
        return float(manual_price)

    discount = Decimal(str(discount_percent or 0))
    price = Decimal(str(mrp)) * (Decimal("1") - discount / Decimal("100"))
    return float(price.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
