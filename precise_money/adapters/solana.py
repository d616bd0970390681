"""Solana adapter.

Native SOL uses 9 decimals; many SPL mints use 6 (USDC-SPL) or 9.
Prefer resolving decimals from the registry or the mint account.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel

from precise_money.adapters.base import check_chain_decimals, fetch_or_fallback, lookup_decimals
from precise_money.codec import from_minor, to_minor
from precise_money.config import DEFAULT_CHAIN_DEFAULTS, ChainDefaults
from precise_money.constants import SOLANA_DEFAULT_DECIMALS
from precise_money.errors import InvalidDecimals
from precise_money.math.rounding import Rounding
from precise_money.parsing import AmountLike
from precise_money.registry import AssetId, Chain, DecimalsRegistry


class SolanaAccountClient(Protocol):
    """Minimal client returning getParsedAccountInfo JSON results."""

    def get_parsed_account_info(self, mint: Any) -> Mapping[str, Any]:
        """Return the jsonParsed account info for a mint (the RPC `result` object)."""
        ...


class MintInfo(BaseModel):
    """Mint fields we care about."""

    decimals: int


class ParsedMintData(BaseModel):
    """The data.parsed wrapper around mint info."""

    info: MintInfo


class MintAccountData(BaseModel):
    """Account data; RPC nodes return either data.parsed.info or data.info."""

    parsed: ParsedMintData | None = None
    info: MintInfo | None = None


class MintAccount(BaseModel):
    """Account value of a mint."""

    data: MintAccountData


class ParsedAccountInfo(BaseModel):
    value: MintAccount | None = None


def solana_to_minor(human: AmountLike, decimals: int = SOLANA_DEFAULT_DECIMALS, mode: Rounding = Rounding.ROUND) -> int:
    return to_minor(human, decimals, mode)


def solana_from_minor(minor: int, decimals: int = SOLANA_DEFAULT_DECIMALS) -> str:
    return from_minor(minor, decimals)


def solana_resolve_decimals(
    registry: DecimalsRegistry,
    *,
    symbol: str | None = None,
    mint: str | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Resolve decimals from the registry, by mint address then symbol."""
    assets = [AssetId(chain=Chain.SOLANA, symbol=symbol or "", address=mint)] if mint else []
    return lookup_decimals(
        registry,
        assets,
        symbol,
        config.solana_decimals if fallback is None else fallback,
    )


def parse_mint_decimals(account_info: Mapping[str, Any], max_decimals: int) -> int:
    """Extract decimals from a getParsedAccountInfo result.

    Raises:
        InvalidDecimals: If the account carries no valid mint decimals
        pydantic.ValidationError: If the payload does not look like an account
    """
    parsed = ParsedAccountInfo.model_validate(account_info)
    if parsed.value is None:
        raise InvalidDecimals("mint account not found")
    data = parsed.value.data
    info = data.parsed.info if data.parsed is not None else data.info
    if info is None:
        raise InvalidDecimals("invalid decimals for mint")
    return check_chain_decimals(info.decimals, max_decimals)


def solana_fetch_mint_decimals(
    client: SolanaAccountClient,
    mint: Any,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Read mint decimals via a parsed account query."""
    return parse_mint_decimals(client.get_parsed_account_info(mint), config.max_chain_decimals)


def solana_ensure_decimals(
    registry: DecimalsRegistry,
    *,
    client: SolanaAccountClient | None = None,
    mint: Any = None,
    symbol: str | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Fetch mint decimals when possible, else resolve from the registry.

    `mint` may be a base58 string or a client-specific public key object;
    only string mints are used for registry lookups.
    """

    def resolve() -> int:
        return solana_resolve_decimals(
            registry,
            symbol=symbol,
            mint=mint if isinstance(mint, str) else None,
            fallback=fallback,
            config=config,
        )

    if client is None or mint is None:
        return resolve()
    return fetch_or_fallback(
        lambda: solana_fetch_mint_decimals(client, mint, config),
        resolve,
        chain=Chain.SOLANA.value,
        asset=str(mint),
    )


__all__ = [
    "SolanaAccountClient",
    "ParsedAccountInfo",
    "solana_to_minor",
    "solana_from_minor",
    "solana_resolve_decimals",
    "parse_mint_decimals",
    "solana_fetch_mint_decimals",
    "solana_ensure_decimals",
]
