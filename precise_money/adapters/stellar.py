"""Stellar adapter.

Classic ledger assets always use 7 decimals. Soroban tokens declare their
own; pass or resolve them explicitly.
"""

from __future__ import annotations

from precise_money.adapters.base import lookup_decimals
from precise_money.codec import from_minor, to_minor
from precise_money.config import DEFAULT_CHAIN_DEFAULTS, ChainDefaults
from precise_money.constants import STELLAR_DEFAULT_DECIMALS
from precise_money.math.rounding import Rounding
from precise_money.parsing import AmountLike
from precise_money.registry import AssetId, Chain, DecimalsRegistry

STELLAR_CLASSIC_DECIMALS = 7


def stellar_classic_to_minor(human: AmountLike) -> int:
    return to_minor(human, STELLAR_CLASSIC_DECIMALS)


def stellar_classic_from_minor(minor: int) -> str:
    return from_minor(minor, STELLAR_CLASSIC_DECIMALS)


def stellar_to_minor(
    human: AmountLike, decimals: int = STELLAR_DEFAULT_DECIMALS, mode: Rounding = Rounding.ROUND
) -> int:
    return to_minor(human, decimals, mode)


def stellar_from_minor(minor: int, decimals: int = STELLAR_DEFAULT_DECIMALS) -> str:
    return from_minor(minor, decimals)


def stellar_resolve_decimals(
    registry: DecimalsRegistry,
    *,
    symbol: str | None = None,
    issuer: str | None = None,
    contract_id: str | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Resolve decimals by Soroban contract id, then classic issuer, then symbol."""
    assets: list[AssetId] = []
    if contract_id:
        assets.append(AssetId(chain=Chain.STELLAR, symbol=symbol or "", address=contract_id))
    if issuer:
        assets.append(AssetId(chain=Chain.STELLAR, symbol=symbol or "", issuer=issuer))
    return lookup_decimals(
        registry,
        assets,
        symbol,
        config.stellar_decimals if fallback is None else fallback,
    )


__all__ = [
    "STELLAR_CLASSIC_DECIMALS",
    "stellar_classic_to_minor",
    "stellar_classic_from_minor",
    "stellar_to_minor",
    "stellar_from_minor",
    "stellar_resolve_decimals",
]
