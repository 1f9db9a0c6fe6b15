"""
Chain identification types and utilities.

EVM chains are identified by their integer chain IDs (1, 56, 8453, ...).
Market data providers scope contract addresses to a chain with composite
ids of the form ``{chain_id}-{address}`` (e.g. ``8453-0xabc...``);
``ChainScopedId`` is the structured form of those ids.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional

ChainId = int

_SCOPED_ID_RE = re.compile(r"^(?P<chain_id>\d+)-(?P<address>.+)$")


@dataclass(frozen=True)
class ChainScopedId:
    """A contract address qualified by the chain it lives on."""

    chain_id: ChainId
    address: str

    def __str__(self) -> str:
        return self.format(self.chain_id, self.address)

    @staticmethod
    def format(chain_id: ChainId, address: str) -> str:
        return f"{chain_id}-{address}"

    @classmethod
    def parse(cls, value: str, default_chain_id: ChainId) -> "ChainScopedId":
        """
        Split a scoped id into chain and address.

        Values without a numeric chain prefix are bare addresses and are
        attributed to ``default_chain_id`` unchanged.

        Examples:
            >>> ChainScopedId.parse("8453-0xabc", 1)
            ChainScopedId(chain_id=8453, address='0xabc')
            >>> ChainScopedId.parse("0xabc", 1)
            ChainScopedId(chain_id=1, address='0xabc')
        """
        match = _SCOPED_ID_RE.match(value or "")
        if match is None:
            return cls(chain_id=default_chain_id, address=value)
        return cls(chain_id=int(match.group("chain_id")), address=match.group("address"))

    @classmethod
    def strip_prefix(cls, value: str, chain_id: ChainId) -> Optional[str]:
        """
        Address part of ``value`` when it is scoped to ``chain_id``, else None.

        Examples:
            >>> ChainScopedId.strip_prefix("8453-0xabc", 8453)
            '0xabc'
            >>> ChainScopedId.strip_prefix("1-0xabc", 8453) is None
            True
        """
        if _SCOPED_ID_RE.match(value or "") is None:
            return None
        parsed = cls.parse(value, default_chain_id=chain_id)
        return parsed.address if parsed.chain_id == chain_id else None

    def matches(self, value: str) -> bool:
        """Case-insensitive comparison against a raw scoped id string."""
        return str(self).lower() == (value or "").lower()


def resolve_chain_id(chain: str | int | None, chain_ids: Mapping[str, ChainId]) -> Optional[ChainId]:
    """
    Convert a chain name (or numeric id) to a ChainId using ``chain_ids``.

    Returns None when the chain is not in the table.
    """
    if chain is None:
        return None
    if isinstance(chain, int):
        return chain

    key = chain.strip().lower()
    if key in chain_ids:
        return chain_ids[key]
    if key.isdigit():
        return int(key)
    return None
