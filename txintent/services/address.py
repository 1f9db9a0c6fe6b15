"""Helpers for normalizing chain identifiers and classifying token references."""

from __future__ import annotations

from eth_utils import is_hex_address

_CHAIN_ALIASES = {
    "eth": "ethereum",
    "ethereum": "ethereum",
    "mainnet": "ethereum",
    "base-mainnet": "base",
    "base": "base",
    "bnb": "bsc",
    "binance": "bsc",
    "bsc": "bsc",
    "arb": "arbitrum",
    "arbitrum": "arbitrum",
}


def normalize_chain(chain: str | None) -> str:
    """Collapse user-provided chain identifiers into canonical slugs."""

    if not chain:
        return "ethereum"
    canonical = _CHAIN_ALIASES.get(chain.lower().strip())
    return canonical or chain.lower().strip()


def is_evm_address(value: str) -> bool:
    """True for ``0x`` followed by 40 hex characters, in any casing.

    Checksums are not verified: mixed-case input that fails EIP-55 is still
    an address.
    """
    if not isinstance(value, str):
        return False
    return value.startswith("0x") and is_hex_address(value)


__all__ = [
    "normalize_chain",
    "is_evm_address",
]
