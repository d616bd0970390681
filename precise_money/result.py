"""Result types for fallible precise_money operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class MoneyError(str, Enum):
    """Kinds of amount parsing and arithmetic errors."""

    INVALID_AMOUNT_FORMAT = "invalid_amount_format"
    INVALID_DECIMALS = "invalid_decimals"
    INVALID_SCALE = "invalid_scale"
    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_PRICE = "negative_price"
    INVALID_BPS = "invalid_bps"
    INVALID_LOT_SIZE = "invalid_lot_size"
    INVALID_QUANTITY = "invalid_quantity"


@dataclass(frozen=True)
class MoneyResult(Generic[T]):
    """Result of a fallible amount operation.

    Gives explicit success/failure handling for callers that prefer not to
    catch exceptions (see precise_money.checked).

    Attributes:
        value: The computed value, or None if the operation failed.
        error: If the operation failed, the kind of error that occurred.
        error_detail: Optional human-readable detail about the error.

    Examples:
        result = checked_to_minor("1.5", 2)
        assert result.is_valid
        assert result.value == 150

        result = checked_to_minor("abc", 2)
        assert result.error is MoneyError.INVALID_AMOUNT_FORMAT
    """

    value: T | None
    error: MoneyError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the operation failed."""
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, raising the matching exception on failure."""
        if self.error is not None:
            from precise_money.errors import ERRORS_BY_KIND

            raise ERRORS_BY_KIND[self.error](self.error_detail or self.error.value)
        return self.value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T) -> MoneyResult[T]:
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def with_error(cls, error: MoneyError, detail: str | None = None) -> MoneyResult[T]:
        """Create an error result."""
        return cls(value=None, error=error, error_detail=detail)


__all__ = ["MoneyError", "MoneyResult"]
