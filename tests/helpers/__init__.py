"""Test helpers module for shared test utilities.

- constants: Asset addresses, mints and denoms
- fakes: Chain client test doubles
"""

from tests.helpers.constants import (
    ATOM_DENOM,
    DAI,
    OSMOSIS_USDC_DENOM,
    TOKEN_DECIMALS,
    USDC,
    USDC_SPL_MINT,
    USDC_STELLAR_ISSUER,
    WBTC,
    WETH,
)
from tests.helpers.fakes import FakeCosmosClient, FakeEvmClient, FakeSolanaClient, mint_account

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "USDC_SPL_MINT",
    "USDC_STELLAR_ISSUER",
    "ATOM_DENOM",
    "OSMOSIS_USDC_DENOM",
    "TOKEN_DECIMALS",
    # Fakes
    "FakeEvmClient",
    "FakeSolanaClient",
    "FakeCosmosClient",
    "mint_account",
]
