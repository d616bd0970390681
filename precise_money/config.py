"""Configuration for decimals resolution."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from precise_money.constants import (
    COSMOS_DEFAULT_DECIMALS,
    EVM_DEFAULT_DECIMALS,
    MAX_CHAIN_DECIMALS,
    SOLANA_DEFAULT_DECIMALS,
    STELLAR_DEFAULT_DECIMALS,
)


@dataclass(frozen=True)
class ChainDefaults:
    """Fallback decimals used by the chain adapters.

    Attributes:
        evm_decimals: Fallback for EVM tokens (default: 18)
        solana_decimals: Fallback for SPL mints (default: 9)
        stellar_decimals: Fallback for Stellar assets (default: 7)
        cosmos_decimals: Fallback for Cosmos denoms (default: 6)
        max_chain_decimals: Largest decimals value accepted from a chain
            query (default: 36). Larger values raise InvalidDecimals.
    """

    evm_decimals: int = EVM_DEFAULT_DECIMALS
    solana_decimals: int = SOLANA_DEFAULT_DECIMALS
    stellar_decimals: int = STELLAR_DEFAULT_DECIMALS
    cosmos_decimals: int = COSMOS_DEFAULT_DECIMALS
    max_chain_decimals: int = MAX_CHAIN_DECIMALS


def _default_symbols() -> Mapping[str, int]:
    return MappingProxyType({"BRL": 2, "USD": 2, "USDC": 6, "USDT": 6})


@dataclass(frozen=True)
class RegistryConfig:
    """Seed entries for DecimalsRegistry.with_defaults.

    Attributes:
        symbol_decimals: Decimals by symbol. USDC/USDT are 6 on most chains
            but not all; override per asset id where they differ.
    """

    symbol_decimals: Mapping[str, int] = field(default_factory=_default_symbols)


DEFAULT_CHAIN_DEFAULTS = ChainDefaults()
DEFAULT_REGISTRY_CONFIG = RegistryConfig()
