"""Tests for the Stellar adapter."""

from precise_money import AssetId, Chain, Rounding
from precise_money.adapters.stellar import (
    STELLAR_CLASSIC_DECIMALS,
    stellar_classic_from_minor,
    stellar_classic_to_minor,
    stellar_from_minor,
    stellar_resolve_decimals,
    stellar_to_minor,
)
from tests.helpers import USDC_STELLAR_ISSUER

SOROBAN_TOKEN = "CCW67TSZV3SSS2HXMBQ5JFGCKJNXKZM7UQUWUZPUTHXSTZLEO7SJMI75"


class TestStellarCodec:
    def test_classic_is_7_decimals(self):
        assert STELLAR_CLASSIC_DECIMALS == 7
        assert stellar_classic_to_minor("1") == 10_000_000
        assert stellar_classic_from_minor(12_345_678) == "1.2345678"

    def test_classic_rounds_on_discarded_digit(self):
        """Any non-zero digit past the 7th bumps the last place."""
        assert stellar_classic_to_minor("0.00000004") == 1
        assert stellar_classic_to_minor("0.000000009") == 0

    def test_soroban_decimals(self):
        assert stellar_to_minor("1.5", 18) == 1_500_000_000_000_000_000
        assert stellar_to_minor("0.19", 1, Rounding.FLOOR) == 1
        assert stellar_from_minor(15, 1) == "1.5"


class TestStellarResolveDecimals:
    """Resolution order: contract id, issuer, symbol, fallback."""

    def test_contract_id_first(self, registry):
        registry.set_by_id(AssetId(chain=Chain.STELLAR, symbol="USDC", address=SOROBAN_TOKEN), 18)
        registry.set_by_id(AssetId(chain=Chain.STELLAR, symbol="USDC", issuer=USDC_STELLAR_ISSUER), 7)
        decimals = stellar_resolve_decimals(
            registry, symbol="USDC", issuer=USDC_STELLAR_ISSUER, contract_id=SOROBAN_TOKEN
        )
        assert decimals == 18

    def test_issuer(self, registry):
        registry.set_by_id(AssetId(chain=Chain.STELLAR, symbol="USDC", issuer=USDC_STELLAR_ISSUER), 7)
        assert stellar_resolve_decimals(registry, symbol="USDC", issuer=USDC_STELLAR_ISSUER) == 7

    def test_symbol(self, registry):
        assert stellar_resolve_decimals(registry, symbol="BRL", issuer="GUNKNOWN") == 2

    def test_fallback(self, empty_registry):
        assert stellar_resolve_decimals(empty_registry, symbol="XLM") == 7
        assert stellar_resolve_decimals(empty_registry, fallback=4) == 4
