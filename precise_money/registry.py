"""Decimals lookup by symbol and by full asset id.

The registry is an ordinary object owned by the caller; there is no
module-level instance. Writes are last-write-wins and unsynchronized.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

import structlog
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from precise_money.config import DEFAULT_REGISTRY_CONFIG, RegistryConfig
from precise_money.math.pow10 import require_decimals

logger = structlog.get_logger()


class Chain(str, Enum):
    """Ledger family an asset lives on."""

    STELLAR = "stellar"
    EVM = "evm"
    SOLANA = "solana"
    COSMOS = "cosmos"


class AssetId(BaseModel):
    """Full identity of an asset.

    EVM addresses are lowercased so lookups are case-insensitive.
    """

    chain: Chain
    symbol: str = ""
    address: str | None = None
    issuer: str | None = None
    # EVM chain ids are ints, Cosmos chain ids are strings ("cosmoshub-4")
    chain_id: int | str | None = Field(default=None, alias="chainId")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("address")
    @classmethod
    def _normalize_evm_address(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is not None and info.data.get("chain") is Chain.EVM:
            return value.lower()
        return value

    def key(self) -> str:
        """Registry key: chain:chain_id:SYMBOL:address:issuer."""
        return ":".join(
            [
                self.chain.value,
                "" if self.chain_id is None else str(self.chain_id),
                self.symbol.upper(),
                self.address or "",
                self.issuer or "",
            ]
        )


class DecimalsRegistry:
    """Runtime table of asset decimals.

    Symbol lookups are case-insensitive. Asset id lookups match the full
    AssetId key, so the same symbol can carry different decimals on
    different chains.
    """

    def __init__(self, symbols: Mapping[str, int] | None = None) -> None:
        """Initialize the registry.

        Args:
            symbols: Initial decimals by symbol. If None, starts empty.
        """
        self._by_symbol: dict[str, int] = {}
        self._by_id: dict[str, int] = {}
        for symbol, decimals in (symbols or {}).items():
            self.set(symbol, decimals)

    @classmethod
    def with_defaults(cls, config: RegistryConfig = DEFAULT_REGISTRY_CONFIG) -> DecimalsRegistry:
        """Create a registry seeded with common fiat and stablecoin decimals."""
        return cls(config.symbol_decimals)

    def get(self, symbol: str) -> int | None:
        return self._by_symbol.get(symbol.upper())

    def set(self, symbol: str, decimals: int) -> None:
        """Set decimals for a symbol.

        Raises:
            InvalidDecimals: If decimals is not a non-negative integer
        """
        require_decimals(decimals)
        key = symbol.upper()
        previous = self._by_symbol.get(key)
        if previous is not None and previous != decimals:
            logger.debug("decimals_override", symbol=key, previous=previous, decimals=decimals)
        self._by_symbol[key] = decimals

    def get_by_id(self, asset: AssetId) -> int | None:
        return self._by_id.get(asset.key())

    def set_by_id(self, asset: AssetId, decimals: int) -> None:
        """Set decimals for a full asset id.

        Raises:
            InvalidDecimals: If decimals is not a non-negative integer
        """
        require_decimals(decimals)
        key = asset.key()
        previous = self._by_id.get(key)
        if previous is not None and previous != decimals:
            logger.debug("decimals_override", asset=key, previous=previous, decimals=decimals)
        self._by_id[key] = decimals

    def __len__(self) -> int:
        return len(self._by_symbol) + len(self._by_id)


__all__ = ["Chain", "AssetId", "DecimalsRegistry"]
