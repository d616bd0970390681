"""Conversion between ints and digit strings of any length.

int(str) and str(int) refuse values longer than
sys.get_int_max_str_digits() (4300 digits by default). Decimal converts
in both directions without that limit, so every int <-> text conversion
in precise_money goes through these helpers.
"""

from __future__ import annotations

from decimal import Decimal


def digits_to_int(digits: str) -> int:
    """Parse a string of ASCII digits into an int; "" is 0."""
    return int(Decimal(digits)) if digits else 0


def int_to_digits(value: int) -> str:
    """Render an int in plain decimal notation, "-" prefixed when negative."""
    return format(Decimal(value), "f")


def describe(value: object) -> str:
    """repr() for error messages, safe for ints of any size."""
    if isinstance(value, int) and not isinstance(value, bool):
        return int_to_digits(value)
    return repr(value)


__all__ = ["digits_to_int", "int_to_digits", "describe"]
