"""Pytest configuration and fixtures."""

import pytest

from precise_money import DecimalsRegistry
from tests.helpers import FakeCosmosClient, FakeEvmClient, FakeSolanaClient, TOKEN_DECIMALS


@pytest.fixture
def registry() -> DecimalsRegistry:
    """Registry seeded with the default symbol decimals."""
    return DecimalsRegistry.with_defaults()


@pytest.fixture
def empty_registry() -> DecimalsRegistry:
    """Registry with no entries."""
    return DecimalsRegistry()


@pytest.fixture
def evm_client() -> FakeEvmClient:
    """EVM client knowing the mainnet test tokens."""
    return FakeEvmClient(dict(TOKEN_DECIMALS))


@pytest.fixture
def solana_client() -> FakeSolanaClient:
    return FakeSolanaClient()


@pytest.fixture
def cosmos_client() -> FakeCosmosClient:
    return FakeCosmosClient()
