"""Tests for DecimalsRegistry and AssetId."""

import pytest
from pydantic import ValidationError

from precise_money import AssetId, Chain, DecimalsRegistry
from precise_money.config import RegistryConfig
from precise_money.errors import InvalidDecimals
from tests.helpers import USDC


class TestAssetId:
    """Tests for AssetId."""

    def test_key_layout(self):
        asset = AssetId(chain=Chain.EVM, symbol="usdc", address=USDC, chain_id=1)
        assert asset.key() == f"evm:1:USDC:{USDC}:"

    def test_chain_from_string(self):
        assert AssetId(chain="stellar", symbol="XLM").chain is Chain.STELLAR

    def test_alias(self):
        assert AssetId.model_validate({"chain": "evm", "symbol": "X", "chainId": 10}).chain_id == 10

    def test_evm_address_lowercased(self):
        asset = AssetId(chain=Chain.EVM, address=USDC.upper().replace("0X", "0x"))
        assert asset.address == USDC

    def test_non_evm_address_preserved(self):
        asset = AssetId(chain=Chain.SOLANA, address="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
        assert asset.address == "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

    def test_string_chain_id(self):
        asset = AssetId(chain=Chain.COSMOS, symbol="ATOM", address="uatom", chain_id="cosmoshub-4")
        assert asset.key() == "cosmos:cosmoshub-4:ATOM:uatom:"

    def test_frozen(self):
        asset = AssetId(chain=Chain.EVM, symbol="X")
        with pytest.raises(ValidationError):
            asset.symbol = "Y"  # type: ignore[misc]

    def test_unknown_chain(self):
        with pytest.raises(ValidationError):
            AssetId(chain="bitcoin", symbol="BTC")  # type: ignore[arg-type]


class TestDecimalsRegistry:
    """Tests for DecimalsRegistry."""

    def test_defaults(self, registry):
        assert registry.get("USD") == 2
        assert registry.get("BRL") == 2
        assert registry.get("USDC") == 6
        assert registry.get("USDT") == 6

    def test_empty(self, empty_registry):
        assert empty_registry.get("USD") is None
        assert len(empty_registry) == 0

    def test_symbol_case_insensitive(self, empty_registry):
        empty_registry.set("wbtc", 8)
        assert empty_registry.get("WBTC") == 8
        assert empty_registry.get("Wbtc") == 8

    def test_last_write_wins(self, registry):
        registry.set("USDC", 18)
        assert registry.get("usdc") == 18

    def test_by_id(self, empty_registry):
        bsc_usdc = AssetId(chain=Chain.EVM, symbol="USDC", address=USDC, chain_id=56)
        empty_registry.set_by_id(bsc_usdc, 18)
        assert empty_registry.get_by_id(bsc_usdc) == 18
        assert empty_registry.get_by_id(AssetId(chain=Chain.EVM, symbol="USDC", address=USDC, chain_id=1)) is None
        assert empty_registry.get("USDC") is None

    def test_by_id_equal_keys_match(self, empty_registry):
        """Lookups use the key, not object identity."""
        empty_registry.set_by_id(AssetId(chain=Chain.SOLANA, symbol="usdc", address="mint"), 6)
        assert empty_registry.get_by_id(AssetId(chain=Chain.SOLANA, symbol="USDC", address="mint")) == 6

    def test_invalid_decimals(self, empty_registry):
        with pytest.raises(InvalidDecimals):
            empty_registry.set("X", -1)
        with pytest.raises(InvalidDecimals):
            empty_registry.set_by_id(AssetId(chain=Chain.EVM, symbol="X"), 2.5)  # type: ignore[arg-type]

    def test_custom_config(self):
        registry = DecimalsRegistry.with_defaults(RegistryConfig(symbol_decimals={"EUR": 2}))
        assert registry.get("EUR") == 2
        assert registry.get("USD") is None

    def test_instances_are_independent(self):
        """No shared module-level state between registries."""
        a = DecimalsRegistry.with_defaults()
        b = DecimalsRegistry.with_defaults()
        a.set("USD", 4)
        assert b.get("USD") == 2
