"""Conversion between human amounts and integer minor units."""

from __future__ import annotations

from precise_money.math.digits import digits_to_int, int_to_digits
from precise_money.math.pow10 import pow10, require_decimals
from precise_money.math.rounding import Rounding, round_adjust
from precise_money.parsing import AmountLike, normalize_amount_input


def to_minor(human: AmountLike, decimals: int, mode: Rounding = Rounding.ROUND) -> int:
    """Convert a human amount to minor units at the given precision.

    One extra fraction digit is kept as a rounding indicator; only whether
    it is non-zero matters. Rounding is applied to the unsigned magnitude
    and the sign afterwards, so FLOOR truncates toward zero for negative
    amounts:

        to_minor("1.2345", 3)                  == 1235
        to_minor("1.2345", 3, Rounding.FLOOR)  == 1234
        to_minor("-1.2345", 3, Rounding.FLOOR) == -1234
        to_minor("-1.2345", 3, Rounding.CEIL)  == -1235

    Args:
        human: Text or number, e.g. "12.345" or "1.234,56"
        decimals: Number of fractional digits a minor unit represents
        mode: Rounding policy for discarded digits (default: ROUND)

    Returns:
        Amount in minor units

    Raises:
        InvalidDecimals: If decimals is not a non-negative integer
        InvalidAmountFormat: If human cannot be parsed
    """
    require_decimals(decimals)
    parsed = normalize_amount_input(human)

    padded = (parsed.frac_digits + "0" * (decimals + 1))[: decimals + 1]
    retained = padded[:decimals]
    round_digit = padded[decimals]

    base = digits_to_int(parsed.int_digits) * pow10(decimals) + digits_to_int(retained)
    if round_digit != "0":
        base = round_adjust(base, 1, mode)
    return -base if parsed.is_negative else base


def from_minor(minor: int, decimals: int) -> str:
    """Render minor units with exactly `decimals` fractional digits.

    Examples:
        from_minor(1234567, 2) == "12345.67"
        from_minor(-5, 3) == "-0.005"
        from_minor(123, 0) == "123"

    Raises:
        InvalidDecimals: If decimals is not a non-negative integer
    """
    require_decimals(decimals)
    negative = minor < 0
    whole, frac = divmod(abs(minor), pow10(decimals))
    text = int_to_digits(whole)
    if decimals > 0:
        text = f"{text}.{int_to_digits(frac).rjust(decimals, '0')}"
    return "-" + text if negative else text


__all__ = ["to_minor", "from_minor"]
