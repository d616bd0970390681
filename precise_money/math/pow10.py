"""Powers of ten with a small precomputed table."""

from __future__ import annotations

from precise_money.constants import POW10_CACHE_SIZE
from precise_money.errors import InvalidDecimals
from precise_money.math.digits import describe

_POW10: tuple[int, ...] = tuple(10**i for i in range(POW10_CACHE_SIZE))


def _is_non_negative_int(value: object) -> bool:
    # bool is an int subclass but never a valid precision
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def require_decimals(
    value: object,
    name: str = "decimals",
    error: type[InvalidDecimals] = InvalidDecimals,
) -> int:
    """Validate a decimals (or scale) argument.

    Args:
        value: Candidate decimals value
        name: Argument name for the error message
        error: Exception class to raise (InvalidDecimals or a subclass)

    Returns:
        The validated value

    Raises:
        InvalidDecimals: If value is not a non-negative integer
    """
    if not _is_non_negative_int(value):
        raise error(f"{name} must be a non-negative integer, got {describe(value)}")
    return value  # type: ignore[return-value]


def pow10(n: int) -> int:
    """Return 10**n, served from the cache for small n.

    Raises:
        InvalidDecimals: If n is not a non-negative integer
    """
    if not _is_non_negative_int(n):
        raise InvalidDecimals(f"pow10 expects a non-negative integer, got {describe(n)}")
    if n < POW10_CACHE_SIZE:
        return _POW10[n]
    return 10**n


__all__ = ["pow10", "require_decimals"]
