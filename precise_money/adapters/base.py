"""Shared helpers for chain adapters."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from precise_money.errors import InvalidDecimals
from precise_money.registry import AssetId, DecimalsRegistry

logger = structlog.get_logger()


def lookup_decimals(
    registry: DecimalsRegistry,
    assets: Iterable[AssetId],
    symbol: str | None,
    fallback: int,
) -> int:
    """Resolve decimals: first matching asset id, then symbol, then fallback.

    Args:
        registry: Registry to consult
        assets: Candidate asset ids, most specific first
        symbol: Symbol to try after the asset ids
        fallback: Returned when nothing matches

    Returns:
        Resolved decimals
    """
    for asset in assets:
        decimals = registry.get_by_id(asset)
        if decimals is not None:
            return decimals
    if symbol:
        decimals = registry.get(symbol)
        if decimals is not None:
            return decimals
    logger.debug("decimals_fallback", symbol=symbol, fallback=fallback)
    return fallback


def check_chain_decimals(value: object, max_decimals: int) -> int:
    """Validate decimals reported by a chain.

    Raises:
        InvalidDecimals: If value is not an integer in [0, max_decimals]
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= max_decimals:
        raise InvalidDecimals(f"invalid decimals from chain: {value!r}")
    return value


def fetch_or_fallback(
    fetch: Callable[[], int],
    resolve: Callable[[], int],
    chain: str,
    asset: str,
) -> int:
    """Try an on-chain fetch, falling back to registry resolution.

    Fetch failures are logged and never raised; the client is external
    and may fail in arbitrary ways.
    """
    try:
        return fetch()
    except Exception as e:
        logger.warning(
            "decimals_fetch_failed",
            chain=chain,
            asset=asset,
            error=str(e),
        )
    return resolve()


__all__ = ["lookup_decimals", "check_chain_decimals", "fetch_or_fallback"]
