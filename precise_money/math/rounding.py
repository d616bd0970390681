"""Rounding policies for integer division.

All rounding-sensitive operations in precise_money route through
div_round (or round_adjust for the codec) so tie-breaking is identical
everywhere.

Quotients are truncated toward zero first, then adjusted:
- FLOOR: toward negative infinity
- CEIL: toward positive infinity
- ROUND: half away from zero
- BANKERS: half to even
"""

from __future__ import annotations

from enum import Enum

from precise_money.errors import DivisionByZero


class Rounding(str, Enum):
    """Rounding policy."""

    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"
    BANKERS = "bankers"


def trunc_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Divide truncating toward zero.

    Python's // floors, so the quotient is computed on magnitudes and the
    remainder takes the sign of the numerator.

    Raises:
        DivisionByZero: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZero("Division by zero")
    q = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        q = -q
    return q, numerator - q * denominator


def div_round(numerator: int, denominator: int, mode: Rounding) -> int:
    """Divide two integers under a rounding policy.

    Args:
        numerator: Dividend
        denominator: Divisor
        mode: Rounding policy

    Returns:
        The rounded quotient

    Raises:
        DivisionByZero: If denominator is zero
    """
    q, r = trunc_divmod(numerator, denominator)
    if r == 0:
        return q

    sign = 1 if (numerator > 0) == (denominator > 0) else -1
    mode = Rounding(mode)

    if mode is Rounding.FLOOR:
        return q - 1 if sign < 0 else q
    if mode is Rounding.CEIL:
        return q + 1 if sign > 0 else q

    twice = abs(2 * r)
    d = abs(denominator)
    if mode is Rounding.ROUND:
        return q + sign if twice >= d else q

    # BANKERS
    if twice > d:
        return q + sign
    if twice < d:
        return q
    return q if q % 2 == 0 else q + sign


def round_adjust(base: int, sign: int, mode: Rounding) -> int:
    """Add one unit in the last place when discarded digits require it.

    Used when a truncated magnitude is known to have a non-zero discarded
    tail. FLOOR never adjusts; BANKERS keeps even bases.
    """
    mode = Rounding(mode)
    if mode is Rounding.CEIL:
        return base + 1 if sign > 0 else base
    if mode is Rounding.ROUND:
        return base + sign
    if mode is Rounding.BANKERS:
        return base if base % 2 == 0 else base + sign
    return base


__all__ = ["Rounding", "trunc_divmod", "div_round", "round_adjust"]
