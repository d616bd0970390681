"""Rescaling integer amounts between decimal precisions."""

from __future__ import annotations

from precise_money.math.pow10 import pow10, require_decimals
from precise_money.math.rounding import Rounding, div_round


def scale_units(
    amount: int,
    from_decimals: int,
    to_decimals: int,
    mode: Rounding = Rounding.FLOOR,
) -> int:
    """Scale an integer amount from one precision to another.

    Widening multiplies exactly. Narrowing divides under `mode`, which
    defaults to FLOOR since precision is being discarded.

    Args:
        amount: Amount in minor units at from_decimals
        from_decimals: Current precision
        to_decimals: Target precision
        mode: Rounding policy when narrowing (default: FLOOR)

    Returns:
        Amount in minor units at to_decimals

    Raises:
        InvalidDecimals: If either precision is not a non-negative integer
    """
    require_decimals(from_decimals, "from_decimals")
    require_decimals(to_decimals, "to_decimals")
    if from_decimals == to_decimals:
        return amount
    if from_decimals < to_decimals:
        return amount * pow10(to_decimals - from_decimals)
    return div_round(amount, pow10(from_decimals - to_decimals), mode)


__all__ = ["scale_units"]
