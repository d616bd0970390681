"""EVM adapter.

18 decimals is right for ETH and many ERC-20s but not universal
(USDC is 6, WBTC is 8). Prefer resolving decimals per token.
"""

from __future__ import annotations

import re
from typing import Protocol

from precise_money.adapters.base import check_chain_decimals, fetch_or_fallback, lookup_decimals
from precise_money.codec import from_minor, to_minor
from precise_money.config import DEFAULT_CHAIN_DEFAULTS, ChainDefaults
from precise_money.constants import ERC20_DECIMALS_SELECTOR, EVM_DEFAULT_DECIMALS
from precise_money.math.rounding import Rounding
from precise_money.parsing import AmountLike
from precise_money.registry import AssetId, Chain, DecimalsRegistry

_ADDRESS = re.compile(r"0x[a-fA-F0-9]{40}")


class EvmCallClient(Protocol):
    """Minimal client able to perform an eth_call.

    Wrap web3.py, an RPC session or a test double behind this interface.
    """

    def eth_call(self, to: str, data: str) -> bytes | str:
        """Execute a read-only call.

        Args:
            to: Contract address (lowercase 0x-prefixed)
            data: Calldata as 0x-prefixed hex

        Returns:
            Raw return data as bytes or 0x-prefixed hex
        """
        ...


def normalize_evm_address(address: str) -> str:
    """Lowercase and validate an EVM address.

    Raises:
        ValueError: If address is not 0x + 40 hex chars
    """
    if not _ADDRESS.fullmatch(address):
        raise ValueError(f"Invalid EVM address: {address} (must be 0x + 40 hex chars)")
    return address.lower()


def evm_to_minor(human: AmountLike, decimals: int = EVM_DEFAULT_DECIMALS, mode: Rounding = Rounding.ROUND) -> int:
    return to_minor(human, decimals, mode)


def evm_from_minor(minor: int, decimals: int = EVM_DEFAULT_DECIMALS) -> str:
    return from_minor(minor, decimals)


def evm_resolve_decimals(
    registry: DecimalsRegistry,
    *,
    symbol: str | None = None,
    address: str | None = None,
    chain_id: int | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Resolve decimals from the registry, by (address, chain_id) then symbol.

    Args:
        registry: Registry to consult
        symbol: Token symbol (e.g. "USDC")
        address: Token contract address
        chain_id: Numeric chain id; required for the address lookup
        fallback: Returned when nothing matches (default: config.evm_decimals)
        config: Chain defaults

    Returns:
        Resolved decimals
    """
    assets: list[AssetId] = []
    if address and isinstance(chain_id, int):
        assets.append(AssetId(chain=Chain.EVM, symbol=symbol or "", address=address, chain_id=chain_id))
    return lookup_decimals(
        registry,
        assets,
        symbol,
        config.evm_decimals if fallback is None else fallback,
    )


def evm_fetch_decimals(
    client: EvmCallClient,
    token: str,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Read ERC-20 decimals() from chain.

    Raises:
        ValueError: If token is not a valid address
        InvalidDecimals: If the token reports decimals above config.max_chain_decimals
    """
    from eth_abi import decode  # type: ignore[attr-defined]

    raw = client.eth_call(normalize_evm_address(token), "0x" + ERC20_DECIMALS_SELECTOR.hex())
    data = bytes.fromhex(raw[2:] if raw.startswith("0x") else raw) if isinstance(raw, str) else bytes(raw)
    (decimals,) = decode(["uint8"], data)
    return check_chain_decimals(decimals, config.max_chain_decimals)


def evm_ensure_decimals(
    registry: DecimalsRegistry,
    *,
    client: EvmCallClient | None = None,
    address: str | None = None,
    chain_id: int | None = None,
    symbol: str | None = None,
    fallback: int | None = None,
    config: ChainDefaults = DEFAULT_CHAIN_DEFAULTS,
) -> int:
    """Fetch decimals from chain when possible, else resolve from the registry."""

    def resolve() -> int:
        return evm_resolve_decimals(
            registry, symbol=symbol, address=address, chain_id=chain_id, fallback=fallback, config=config
        )

    if client is None or not address:
        return resolve()
    return fetch_or_fallback(
        lambda: evm_fetch_decimals(client, address, config),
        resolve,
        chain=Chain.EVM.value,
        asset=address,
    )


__all__ = [
    "EvmCallClient",
    "normalize_evm_address",
    "evm_to_minor",
    "evm_from_minor",
    "evm_resolve_decimals",
    "evm_fetch_decimals",
    "evm_ensure_decimals",
]
