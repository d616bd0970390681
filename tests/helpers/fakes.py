"""Test doubles for chain clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from eth_abi import encode  # type: ignore[attr-defined]


class FakeEvmClient:
    """EVM client answering decimals() calls from a fixed table.

    Tracks calls for assertions. Tokens missing from the table raise,
    like a revert would.
    """

    def __init__(self, decimals: dict[str, int] | None = None, as_hex: bool = True) -> None:
        self.decimals = decimals or {}
        self.as_hex = as_hex
        self.calls: list[tuple[str, str]] = []

    def eth_call(self, to: str, data: str) -> bytes | str:
        self.calls.append((to, data))
        if to not in self.decimals:
            raise RuntimeError(f"execution reverted: {to}")
        encoded = encode(["uint256"], [self.decimals[to]])
        return "0x" + encoded.hex() if self.as_hex else encoded


class FakeSolanaClient:
    """Solana client returning canned getParsedAccountInfo results."""

    def __init__(self, accounts: dict[str, Mapping[str, Any]] | None = None) -> None:
        self.accounts = accounts or {}
        self.calls: list[Any] = []

    def get_parsed_account_info(self, mint: Any) -> Mapping[str, Any]:
        self.calls.append(mint)
        if str(mint) not in self.accounts:
            raise ConnectionError("rpc unavailable")
        return self.accounts[str(mint)]


class FakeCosmosClient:
    """Cosmos client returning canned bank denom metadata."""

    def __init__(self, metadata: dict[str, Mapping[str, Any]] | None = None) -> None:
        self.metadata = metadata or {}
        self.calls: list[str] = []

    def bank_denom_metadata(self, denom: str) -> Mapping[str, Any]:
        self.calls.append(denom)
        if denom not in self.metadata:
            raise LookupError(f"denom metadata not found: {denom}")
        return self.metadata[denom]


def mint_account(decimals: Any, *, nested: bool = True) -> dict[str, Any]:
    """Build a getParsedAccountInfo result for a mint."""
    info = {"decimals": decimals, "supply": "1000000", "isInitialized": True}
    data = {"parsed": {"info": info, "type": "mint"}, "program": "spl-token"} if nested else {"info": info}
    return {"context": {"slot": 1}, "value": {"data": data, "owner": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"}}
