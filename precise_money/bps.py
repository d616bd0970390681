"""Basis-point arithmetic and slippage protection.

Slippage bounds round against the trader:
- slippage_down (exact input, minimum output): floor
- slippage_up (exact output, maximum input): ceiling
"""

from __future__ import annotations

import math
from decimal import Decimal

from precise_money.constants import BPS_BASE
from precise_money.errors import InvalidBps
from precise_money.math.digits import describe
from precise_money.math.rounding import Rounding, div_round

BpsLike = int | float | Decimal
IntLike = int | Decimal


def _as_int(value: IntLike, name: str) -> int:
    """Coerce an integer-valued operand to int.

    Raises:
        TypeError: If value is not an int or an integral Decimal
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise TypeError(f"{name} must be an integer, got {value!r}")


def _check_bps_type(bps: BpsLike) -> None:
    if isinstance(bps, bool) or not isinstance(bps, (int, float, Decimal)):
        raise InvalidBps(f"bps must be a number, got {bps!r}")


def _is_finite(bps: BpsLike) -> bool:
    if isinstance(bps, int):
        return True
    if isinstance(bps, Decimal):
        return bps.is_finite()
    return math.isfinite(bps)


def _is_infinite(bps: BpsLike) -> bool:
    if isinstance(bps, Decimal):
        return bps.is_infinite()
    return isinstance(bps, float) and math.isinf(bps)


def _trunc_bps(bps: BpsLike) -> int:
    """Truncate bps toward zero; fractional bps are dropped.

    Raises:
        InvalidBps: If bps is not a finite number
    """
    _check_bps_type(bps)
    if not _is_finite(bps):
        raise InvalidBps(f"bps must be finite, got {bps!r}")
    return math.trunc(bps)


def mul_div(a: IntLike, b: IntLike, c: IntLike, mode: Rounding = Rounding.ROUND) -> int:
    """Compute a * b / c rounded under `mode`.

    Raises:
        DivisionByZero: If c is zero
    """
    return div_round(_as_int(a, "a") * _as_int(b, "b"), _as_int(c, "c"), mode)


def apply_bps(units: int, bps: BpsLike, mode: Rounding = Rounding.ROUND) -> int:
    """Return the `bps` portion of `units` (e.g. 25 bps of 1_000_000 is 2_500)."""
    return mul_div(units, _trunc_bps(bps), BPS_BASE, mode)


def clamp_bps(bps: BpsLike) -> int:
    """Truncate bps toward zero and clamp to [0, 10_000].

    Raises:
        InvalidBps: If bps is NaN
    """
    _check_bps_type(bps)
    if _is_infinite(bps):
        return BPS_BASE if bps > 0 else 0
    return max(0, min(BPS_BASE, _trunc_bps(bps)))


def apply_slippage(amount_out: int, bps: BpsLike) -> int:
    """Apply slippage to an output amount, returning the floored minimum.

    Raises:
        InvalidBps: If bps is negative or not finite
    """
    _check_bps_type(bps)
    if not _is_finite(bps):
        raise InvalidBps(f"slippage bps must be a finite number, got {bps!r}")
    if bps < 0:
        raise InvalidBps(f"slippage bps must be >= 0, got {describe(bps)}")
    return amount_out * (BPS_BASE - _trunc_bps(bps)) // BPS_BASE


def min_out_for_exact_in(amount_out: int, bps: BpsLike) -> int:
    """Minimum acceptable output for an exact-input trade."""
    return apply_slippage(amount_out, bps)


def slippage_down(amount: int, bps: BpsLike) -> int:
    """Exact input: protect the output downward (floor)."""
    return amount * (BPS_BASE - clamp_bps(bps)) // BPS_BASE


def slippage_up(amount: int, bps: BpsLike) -> int:
    """Exact output: protect the input upward (ceiling)."""
    return div_round(amount * (BPS_BASE + clamp_bps(bps)), BPS_BASE, Rounding.CEIL)


__all__ = [
    "BpsLike",
    "mul_div",
    "apply_bps",
    "clamp_bps",
    "apply_slippage",
    "min_out_for_exact_in",
    "slippage_down",
    "slippage_up",
]
