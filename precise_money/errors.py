"""Error classes for precise_money.

Every error is raised at the point of violation and propagates unchanged.
Each class carries a ``kind`` so callers using result values
(see precise_money.result) can map exceptions to error kinds.
"""

from precise_money.result import MoneyError


class PreciseMoneyError(ValueError):
    """Base error for amount parsing and arithmetic."""

    kind: MoneyError = MoneyError.INVALID_AMOUNT_FORMAT


class InvalidAmountFormat(PreciseMoneyError):
    """Amount string is empty, malformed, or contains non-digit content."""

    kind = MoneyError.INVALID_AMOUNT_FORMAT


class InvalidDecimals(PreciseMoneyError):
    """A decimals argument is not a non-negative integer."""

    kind = MoneyError.INVALID_DECIMALS


class InvalidScale(InvalidDecimals):
    """A display scale is not a non-negative integer."""

    kind = MoneyError.INVALID_SCALE


class DivisionByZero(PreciseMoneyError, ArithmeticError):
    """Denominator is zero."""

    kind = MoneyError.DIVISION_BY_ZERO


class NegativePrice(PreciseMoneyError):
    """Price is negative where only non-negative prices are allowed."""

    kind = MoneyError.NEGATIVE_PRICE


class InvalidBps(PreciseMoneyError):
    """Basis points are negative or not finite."""

    kind = MoneyError.INVALID_BPS


class InvalidLotSize(PreciseMoneyError):
    """Lot size must be positive."""

    kind = MoneyError.INVALID_LOT_SIZE


class InvalidQuantity(PreciseMoneyError):
    """Filled quantity must be positive."""

    kind = MoneyError.INVALID_QUANTITY


ERRORS_BY_KIND: dict[MoneyError, type[PreciseMoneyError]] = {
    cls.kind: cls
    for cls in (
        InvalidAmountFormat,
        InvalidDecimals,
        InvalidScale,
        DivisionByZero,
        NegativePrice,
        InvalidBps,
        InvalidLotSize,
        InvalidQuantity,
    )
}

__all__ = [
    "PreciseMoneyError",
    "InvalidAmountFormat",
    "InvalidDecimals",
    "InvalidScale",
    "DivisionByZero",
    "NegativePrice",
    "InvalidBps",
    "InvalidLotSize",
    "InvalidQuantity",
    "ERRORS_BY_KIND",
]
