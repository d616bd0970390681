"""Normalization of human-entered amounts.

Accepts US and EU conventions without locale configuration: the last '.'
or ',' is the decimal separator and every other separator is grouping.

    "1.234,56"     -> sign=1,  int="1234", frac="56"
    "-1_234.56"    -> sign=-1, int="1234", frac="56"
    "   00012,30 " -> sign=1,  int="12",   frac="30"
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

import structlog

from precise_money.errors import InvalidAmountFormat
from precise_money.math.digits import int_to_digits

logger = structlog.get_logger()

_DIGITS = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[.,]")


@dataclass(frozen=True)
class TextAmount:
    """Amount given as human text, e.g. "1.234,56"."""

    text: str

    def to_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class NumericAmount:
    """Amount given as a Python number.

    Floats are rendered through their shortest repr, so 0.1 becomes "0.1";
    no float arithmetic is performed.
    """

    value: int | float | Decimal

    def to_text(self) -> str:
        value = self.value
        if isinstance(value, bool):
            raise InvalidAmountFormat(f"invalid amount: {value!r}")
        if isinstance(value, int):
            return int_to_digits(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidAmountFormat(f"invalid amount: {value!r}")
            value = Decimal(repr(value))
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidAmountFormat(f"invalid amount: {value!r}")
            return format(value, "f")
        raise InvalidAmountFormat(f"unsupported amount type: {type(value).__name__}")


AmountInput = TextAmount | NumericAmount
AmountLike = TextAmount | NumericAmount | str | int | float | Decimal


def as_amount_input(value: AmountLike) -> AmountInput:
    """Convert a raw str/number into the tagged amount input.

    Raises:
        InvalidAmountFormat: If value is of an unsupported type
    """
    if isinstance(value, (TextAmount, NumericAmount)):
        return value
    if isinstance(value, str):
        return TextAmount(value)
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return NumericAmount(value)
    raise InvalidAmountFormat(f"unsupported amount type: {type(value).__name__}")


@dataclass(frozen=True)
class ParsedAmount:
    """Sign and digit strings of a normalized amount.

    Attributes:
        sign: 1 or -1
        int_digits: Integer digits without leading zeros ("0" if none)
        frac_digits: Fraction digits, possibly empty
    """

    sign: int
    int_digits: str
    frac_digits: str

    @property
    def is_negative(self) -> bool:
        return self.sign < 0


def _is_digits(s: str) -> bool:
    return _DIGITS.fullmatch(s) is not None


def normalize_amount_input(value: AmountLike) -> ParsedAmount:
    """Normalize a human amount into sign, integer and fraction digits.

    Args:
        value: Text or number, e.g. "1.234,56", "1_234.56", Decimal("12.3")

    Returns:
        ParsedAmount with the sign split off and separators removed

    Raises:
        InvalidAmountFormat: If the amount is empty or contains anything
            other than digits, separators and a single leading sign
    """
    original = as_amount_input(value).to_text()
    s = original.strip()
    if not s:
        raise InvalidAmountFormat("empty amount")

    sign = 1
    if s[0] == "+":
        s = s[1:]
    elif s[0] == "-":
        sign = -1
        s = s[1:]

    s = _WHITESPACE.sub("", s).replace("_", "")

    last_dot = s.rfind(".")
    last_comma = s.rfind(",")
    if last_dot < 0 and last_comma < 0:
        int_part = s
        frac_part = ""
    else:
        separator = "." if last_dot > last_comma else ","
        head, *tail = s.split(separator)
        int_part = _SEPARATORS.sub("", head or "0")
        frac_part = _SEPARATORS.sub("", "".join(tail))

    if not _is_digits(int_part) or (frac_part and not _is_digits(frac_part)):
        logger.debug("amount_parse_failed", amount=original)
        raise InvalidAmountFormat(f"invalid amount: {original}")

    return ParsedAmount(
        sign=sign,
        int_digits=int_part.lstrip("0") or "0",
        frac_digits=frac_part,
    )


__all__ = [
    "TextAmount",
    "NumericAmount",
    "AmountInput",
    "AmountLike",
    "as_amount_input",
    "ParsedAmount",
    "normalize_amount_input",
]
