"""Result-returning variants of the fallible operations.

Each checked_* function takes the same arguments as its raising
counterpart and returns a MoneyResult instead of raising a
PreciseMoneyError:

    result = checked_to_minor(user_input, 6)
    if result.is_valid:
        amount = result.value
    else:
        handle_error(result.error)

Only PreciseMoneyError is converted; TypeError and other programming
errors still propagate.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from precise_money.bps import (
    BpsLike,
    apply_bps,
    apply_slippage,
    clamp_bps,
    min_out_for_exact_in,
    mul_div,
    slippage_down,
    slippage_up,
)
from precise_money.codec import from_minor, to_minor
from precise_money.constants import DEFAULT_DISPLAY_SCALE
from precise_money.errors import PreciseMoneyError
from precise_money.lots import split_amount
from precise_money.math.rounding import Rounding
from precise_money.parsing import AmountLike, ParsedAmount, normalize_amount_input
from precise_money.pricing import (
    PriceRatio,
    avg_fiat_price_per_unit,
    convert_units_by_decimals,
    div_to_decimal_string,
    price_ratio_decimals,
)
from precise_money.result import MoneyResult
from precise_money.scaling import scale_units

T = TypeVar("T")


def _capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> MoneyResult[T]:
    try:
        return MoneyResult.ok(func(*args, **kwargs))
    except PreciseMoneyError as e:
        return MoneyResult.with_error(e.kind, str(e))


def checked_normalize_amount_input(value: AmountLike) -> MoneyResult[ParsedAmount]:
    return _capture(normalize_amount_input, value)


def checked_to_minor(human: AmountLike, decimals: int, mode: Rounding = Rounding.ROUND) -> MoneyResult[int]:
    return _capture(to_minor, human, decimals, mode)


def checked_from_minor(minor: int, decimals: int) -> MoneyResult[str]:
    return _capture(from_minor, minor, decimals)


def checked_scale_units(
    amount: int, from_decimals: int, to_decimals: int, mode: Rounding = Rounding.FLOOR
) -> MoneyResult[int]:
    return _capture(scale_units, amount, from_decimals, to_decimals, mode)


def checked_mul_div(a: int, b: int, c: int, mode: Rounding = Rounding.ROUND) -> MoneyResult[int]:
    return _capture(mul_div, a, b, c, mode)


def checked_apply_bps(units: int, bps: BpsLike, mode: Rounding = Rounding.ROUND) -> MoneyResult[int]:
    return _capture(apply_bps, units, bps, mode)


def checked_clamp_bps(bps: BpsLike) -> MoneyResult[int]:
    return _capture(clamp_bps, bps)


def checked_apply_slippage(amount_out: int, bps: BpsLike) -> MoneyResult[int]:
    return _capture(apply_slippage, amount_out, bps)


def checked_min_out_for_exact_in(amount_out: int, bps: BpsLike) -> MoneyResult[int]:
    return _capture(min_out_for_exact_in, amount_out, bps)


def checked_slippage_down(amount: int, bps: BpsLike) -> MoneyResult[int]:
    return _capture(slippage_down, amount, bps)


def checked_slippage_up(amount: int, bps: BpsLike) -> MoneyResult[int]:
    return _capture(slippage_up, amount, bps)


def checked_split_amount(total: int, lot_size: int) -> MoneyResult[list[int]]:
    return _capture(split_amount, total, lot_size)


def checked_price_ratio_decimals(quote_decimals: int, price: AmountLike) -> MoneyResult[PriceRatio]:
    return _capture(price_ratio_decimals, quote_decimals, price)


def checked_convert_units_by_decimals(
    amount: int,
    from_decimals: int,
    to_decimals: int,
    ratio: PriceRatio,
    mode: Rounding = Rounding.ROUND,
) -> MoneyResult[int]:
    return _capture(convert_units_by_decimals, amount, from_decimals, to_decimals, ratio, mode)


def checked_div_to_decimal_string(
    numerator: int, denominator: int, scale: int = DEFAULT_DISPLAY_SCALE
) -> MoneyResult[str]:
    return _capture(div_to_decimal_string, numerator, denominator, scale)


def checked_avg_fiat_price_per_unit(
    *,
    filled_qty: int,
    spent_fiat: int,
    out_decimals: int,
    fiat_decimals: int,
    scale: int = DEFAULT_DISPLAY_SCALE,
) -> MoneyResult[str]:
    return _capture(
        avg_fiat_price_per_unit,
        filled_qty=filled_qty,
        spent_fiat=spent_fiat,
        out_decimals=out_decimals,
        fiat_decimals=fiat_decimals,
        scale=scale,
    )


__all__ = [
    "checked_normalize_amount_input",
    "checked_to_minor",
    "checked_from_minor",
    "checked_scale_units",
    "checked_mul_div",
    "checked_apply_bps",
    "checked_clamp_bps",
    "checked_apply_slippage",
    "checked_min_out_for_exact_in",
    "checked_slippage_down",
    "checked_slippage_up",
    "checked_split_amount",
    "checked_price_ratio_decimals",
    "checked_convert_units_by_decimals",
    "checked_div_to_decimal_string",
    "checked_avg_fiat_price_per_unit",
]
