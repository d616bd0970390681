"""Chain adapters.

Thin wrappers that pick chain-appropriate default decimals and resolve
per-asset decimals from a DecimalsRegistry or a caller-supplied chain
client. All arithmetic is delegated to the core codec.
"""

from precise_money.adapters.cosmos import (
    CosmosBankClient,
    cosmos_ensure_decimals,
    cosmos_fetch_decimals,
    cosmos_from_minor,
    cosmos_resolve_decimals,
    cosmos_to_minor,
)
from precise_money.adapters.evm import (
    EvmCallClient,
    evm_ensure_decimals,
    evm_fetch_decimals,
    evm_from_minor,
    evm_resolve_decimals,
    evm_to_minor,
)
from precise_money.adapters.solana import (
    SolanaAccountClient,
    solana_ensure_decimals,
    solana_fetch_mint_decimals,
    solana_from_minor,
    solana_resolve_decimals,
    solana_to_minor,
)
from precise_money.adapters.stellar import (
    stellar_classic_from_minor,
    stellar_classic_to_minor,
    stellar_from_minor,
    stellar_resolve_decimals,
    stellar_to_minor,
)

__all__ = [
    # EVM
    "EvmCallClient",
    "evm_to_minor",
    "evm_from_minor",
    "evm_resolve_decimals",
    "evm_fetch_decimals",
    "evm_ensure_decimals",
    # Solana
    "SolanaAccountClient",
    "solana_to_minor",
    "solana_from_minor",
    "solana_resolve_decimals",
    "solana_fetch_mint_decimals",
    "solana_ensure_decimals",
    # Stellar
    "stellar_classic_to_minor",
    "stellar_classic_from_minor",
    "stellar_to_minor",
    "stellar_from_minor",
    "stellar_resolve_decimals",
    # Cosmos
    "CosmosBankClient",
    "cosmos_to_minor",
    "cosmos_from_minor",
    "cosmos_resolve_decimals",
    "cosmos_fetch_decimals",
    "cosmos_ensure_decimals",
]
