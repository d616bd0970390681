"""Price ratios, unit conversion and price formatting.

Prices are kept as exact integer ratios and only rendered as decimal
strings at the edge, via div_to_decimal_string.
"""

from __future__ import annotations

from dataclasses import dataclass

from precise_money.bps import mul_div
from precise_money.constants import DEFAULT_DISPLAY_SCALE
from precise_money.errors import DivisionByZero, InvalidQuantity, InvalidScale, NegativePrice
from precise_money.math.digits import describe, digits_to_int, int_to_digits
from precise_money.math.pow10 import pow10, require_decimals
from precise_money.math.rounding import Rounding
from precise_money.parsing import AmountLike, normalize_amount_input


@dataclass(frozen=True)
class PriceRatio:
    """Exact rational price, numerator / denominator.

    Not reduced to lowest terms; consumers multiply and divide directly.

    Attributes:
        numerator: Non-negative integer
        denominator: Positive integer
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise DivisionByZero("Price ratio denominator must be non-zero")
        if self.numerator < 0 or self.denominator < 0:
            raise NegativePrice(
                f"Price ratio terms must be non-negative: {describe(self.numerator)}/{describe(self.denominator)}"
            )


def price_ratio_decimals(quote_decimals: int, price: AmountLike) -> PriceRatio:
    """Build an exact price ratio from a human price string.

    `price` is QUOTE per 1 BASE. Digits beyond `quote_decimals` are
    truncated, not rounded:

        price_ratio_decimals(2, "5.4321") == PriceRatio(543, 100)

    Raises:
        InvalidDecimals: If quote_decimals is not a non-negative integer
        InvalidAmountFormat: If price cannot be parsed
        NegativePrice: If price is negative
    """
    require_decimals(quote_decimals, "quote_decimals")
    parsed = normalize_amount_input(price)
    if parsed.is_negative:
        raise NegativePrice(f"negative price not allowed: {describe(price)}")
    frac = (parsed.frac_digits + "0" * quote_decimals)[:quote_decimals]
    return PriceRatio(
        numerator=digits_to_int(parsed.int_digits + frac),
        denominator=pow10(quote_decimals),
    )


def convert_units_by_decimals(
    amount: int,
    from_decimals: int,
    to_decimals: int,
    ratio: PriceRatio,
    mode: Rounding = Rounding.ROUND,
) -> int:
    """Convert an amount through a price ratio and between precisions.

    Computes amount * (numerator / denominator) * 10^(to - from), rounding
    both steps under `mode`.

    Example:
        # 10.50 USD at 5.43 per unit, 2 -> 7 decimals:
        # 1050 * 543 / 100 = 5701.5 -> 5702, then * 10^5
        convert_units_by_decimals(1050, 2, 7, PriceRatio(543, 100)) == 570_200_000

    Raises:
        InvalidDecimals: If either precision is not a non-negative integer
    """
    require_decimals(from_decimals, "from_decimals")
    require_decimals(to_decimals, "to_decimals")
    diff = to_decimals - from_decimals
    scale_num = pow10(diff) if diff >= 0 else 1
    scale_den = pow10(-diff) if diff < 0 else 1
    priced = mul_div(amount, ratio.numerator, ratio.denominator, mode)
    return mul_div(priced, scale_num, scale_den, mode)


def div_to_decimal_string(numerator: int, denominator: int, scale: int = DEFAULT_DISPLAY_SCALE) -> str:
    """Render numerator / denominator with exactly `scale` fractional digits.

    Digits past `scale` are truncated. The sign is negative whenever exactly
    one operand is negative.

    Examples:
        div_to_decimal_string(123, 10, 4) == "12.3000"
        div_to_decimal_string(-1, 2, 2) == "-0.50"

    Raises:
        DivisionByZero: If denominator is zero
        InvalidScale: If scale is not a non-negative integer
    """
    if denominator == 0:
        raise DivisionByZero("Division by zero")
    require_decimals(scale, "scale", InvalidScale)

    negative = (numerator < 0) != (denominator < 0)
    digits = int_to_digits(abs(numerator) * pow10(scale) // abs(denominator)).rjust(scale + 1, "0")
    if scale == 0:
        text = digits
    else:
        text = f"{digits[:-scale]}.{digits[-scale:]}"
    return "-" + text if negative else text


def avg_fiat_price_per_unit(
    *,
    filled_qty: int,
    spent_fiat: int,
    out_decimals: int,
    fiat_decimals: int,
    scale: int = DEFAULT_DISPLAY_SCALE,
) -> str:
    """Average fiat price per whole unit from cumulative fill totals.

    price = (spent_fiat / 10^fiat_decimals) / (filled_qty / 10^out_decimals)

    Args:
        filled_qty: Filled quantity in output minor units (must be > 0)
        spent_fiat: Fiat spent in fiat minor units
        out_decimals: Precision of filled_qty
        fiat_decimals: Precision of spent_fiat
        scale: Fractional digits in the result (default: 8)

    Returns:
        Decimal string with `scale` fractional digits

    Raises:
        InvalidQuantity: If filled_qty <= 0
        InvalidDecimals: If a decimals argument is invalid
        InvalidScale: If scale is invalid
    """
    if filled_qty <= 0:
        raise InvalidQuantity(f"filled_qty must be > 0, got {describe(filled_qty)}")
    require_decimals(out_decimals, "out_decimals")
    require_decimals(fiat_decimals, "fiat_decimals")
    require_decimals(scale, "scale", InvalidScale)

    numer = spent_fiat * pow10(out_decimals)
    denom = filled_qty * pow10(fiat_decimals)
    return div_to_decimal_string(numer, denom, scale)


__all__ = [
    "PriceRatio",
    "price_ratio_decimals",
    "convert_units_by_decimals",
    "div_to_decimal_string",
    "avg_fiat_price_per_unit",
]
