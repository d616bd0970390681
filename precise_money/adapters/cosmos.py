"""Cosmos adapter.

Micro-denoms (6 decimals) are the common case but not universal; bank
denom metadata is authoritative when available.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, Field

from precise_money.adapters.base import check_chain_decimals, fetch_or_fallback, lookup_decimals
from precise_money.codec import from_minor, to_minor
from precise_money.config import DEFAULT_CHAIN_DEFAULTS, ChainDefaults
from precise_money.constants import COSMOS_DEFAULT_DECIMALS
from precise_money.math.rounding import Rounding
from precise_money.parsing import AmountLike
from precise_money.registry import AssetId, Chain, DecimalsRegistry


class CosmosBankClient(Protocol):
    """Minimal client for the bank module's DenomMetadata query."""

    def bank_denom_metadata(self, denom: str) -> Mapping[str, Any]:
        """Return the `metadata` object for a denom."""
        ...


class DenomUnit(BaseModel):
    """One unit of a denom and its exponent relative to the base unit."""

    denom: str
    exponent: int = Field(default=0, ge=0)
    aliases: list[str] = Field(default_factory=list)


class DenomMetadata(BaseModel):
    """Bank denom metadata (cosmos.bank.v1beta1.Metadata)."""

    base: str | None = None
    display: str | None = None
    denom_units: list[DenomUnit] = Field(default_factory=list)

    def display_exponent(self) -> int | None:
        """Exponent of the display unit, else the largest exponent, else None."""
        for unit in self.denom_units:
            if self.display and unit.denom == self.display:
                return unit.exponent
        largest = max((unit.exponent for unit in self.denom_units), default=0)
        return largest or None


def cosmos_to_minor(human: AmountLike, decimals: int = COSMOS_DEFAULT_DECIMALS, mode: Rounding = Rounding.ROUND) -> int:
    return to_minor(human, decimals, mode)


def cosmos_from_minor(minor: int, decimals: int = COSMOS_DEFAULT_DECIMALS) -> str:
    return from_minor(minor, decimals)


def cosmos_resolve_decimals(
    registry: DecimalsRegistry,
    *,
    denom: str | None = None,
    symbol: str | None = None,
    chain_id: int | str | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Resolve decimals by (denom, chain_id), then denom, then symbol."""
    assets: list[AssetId] = []
    if denom and chain_id is not None:
        assets.append(AssetId(chain=Chain.COSMOS, symbol=symbol or "", address=denom, chain_id=chain_id))
    if denom:
        assets.append(AssetId(chain=Chain.COSMOS, symbol=symbol or "", address=denom))
    return lookup_decimals(
        registry,
        assets,
        symbol,
        config.cosmos_decimals if fallback is None else fallback,
    )


def cosmos_fetch_decimals(
    client: CosmosBankClient,
    denom: str,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Read the display exponent from bank denom metadata.

    Falls back to config.cosmos_decimals when the metadata lists no
    non-zero exponent.
    """
    metadata = DenomMetadata.model_validate(client.bank_denom_metadata(denom))
    exponent = metadata.display_exponent()
    if exponent is None:
        return config.cosmos_decimals
    return check_chain_decimals(exponent, config.max_chain_decimals)


def cosmos_ensure_decimals(
    registry: DecimalsRegistry,
    *,
    client: CosmosBankClient | None = None,
    denom: str | None = None,
    symbol: str | None = None,
    chain_id: int | str | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Fetch denom decimals when possible, else resolve from the registry."""

    def resolve() -> int:
        return cosmos_resolve_decimals(
            registry, denom=denom, symbol=symbol, chain_id=chain_id, fallback=fallback, config=config
        )

    if client is None or not denom:
        return resolve()
    return fetch_or_fallback(
        lambda: cosmos_fetch_decimals(client, denom, config),
        resolve,
        chain=Chain.COSMOS.value,
        asset=denom,
    )


__all__ = [
    "CosmosBankClient",
    "DenomUnit",
    "DenomMetadata",
    "cosmos_to_minor",
    "cosmos_from_minor",
    "cosmos_resolve_decimals",
    "cosmos_fetch_decimals",
    "cosmos_ensure_decimals",
]
