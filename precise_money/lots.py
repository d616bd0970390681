"""Splitting amounts into fixed-size lots."""

from __future__ import annotations

from precise_money.errors import InvalidLotSize
from precise_money.math.digits import describe


def split_amount(total: int, lot_size: int) -> list[int]:
    """Split a total into lot-sized chunks plus a final remainder.

    Examples:
        split_amount(10, 3) == [3, 3, 3, 1]
        split_amount(2, 5) == [2]

    Raises:
        InvalidLotSize: If lot_size <= 0
    """
    if lot_size <= 0:
        raise InvalidLotSize(f"lot_size must be > 0, got {describe(lot_size)}")
    if total <= 0:
        return []
    full_lots, left = divmod(total, lot_size)
    chunks = [lot_size] * full_lots
    if left > 0:
        chunks.append(left)
    return chunks


__all__ = ["split_amount"]
