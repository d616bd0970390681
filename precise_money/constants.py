"""Numeric constants shared across precise_money.

Centralizes the basis-point base, cache sizes and per-chain decimal defaults.
"""

# 10_000 bps = 100%
BPS_BASE = 10_000

# Number of cached powers of ten (10^0 .. 10^38)
POW10_CACHE_SIZE = 39

# Fractional digits rendered by price formatters unless told otherwise
DEFAULT_DISPLAY_SCALE = 8

# Upper bound accepted for decimals read from a chain
MAX_CHAIN_DECIMALS = 36

# Fallback decimals per chain. These are common values, not universal ones:
# USDC is 6 on EVM chains, WBTC is 8, SPL mints are often 6.
EVM_DEFAULT_DECIMALS = 18
SOLANA_DEFAULT_DECIMALS = 9
STELLAR_DEFAULT_DECIMALS = 7  # classic ledger assets are always 7
COSMOS_DEFAULT_DECIMALS = 6  # micro-denom

# ERC-20 decimals() selector: keccak256("decimals()")[:4]
ERC20_DECIMALS_SELECTOR = bytes.fromhex("313ce567")
