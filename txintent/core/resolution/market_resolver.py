"""
Market Resolver

Maps a mint's ``tokenOut`` reference onto the derivative contract it should
target: the YT for PT+YT mints, the SY for SY mints.

``tokenOut`` may be:
- a YT/SY address: matched against the market's chain-scoped ``yt``/``sy`` id
- a market address: matched against the market's ``address``
- a market name (e.g. "stETH"): matched against the market's ``name``

All comparisons are exact and case-insensitive. Lookups by derivative id are
tried across the whole market list before any lookup by market address.
Ids carrying this chain's prefix come back as the bare address, lowercased;
any other value (no prefix, or another chain's prefix) comes back unchanged.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from ...services.address import is_evm_address
from ..chain_types import ChainId, ChainScopedId
from .models import (
    DerivativeField,
    Market,
    OperationType,
    ResolutionError,
    ResolvedDerivative,
)

logger = logging.getLogger(__name__)

MARKET_SYMBOL = "Market symbol"


def _first(markets: Iterable[Market], predicate) -> Optional[Market]:
    return next((m for m in markets if predicate(m)), None)


class MarketResolver:
    """Resolves derivative addresses for one chain."""

    def __init__(self, chain_id: ChainId):
        self.chain_id = chain_id

    def find_market(
        self,
        token_out: str,
        target: DerivativeField,
        markets: Sequence[Market],
    ) -> Optional[Market]:
        if is_evm_address(token_out):
            scoped = ChainScopedId(self.chain_id, token_out)
            address = token_out.lower()
            return (
                _first(markets, lambda m: scoped.matches(m.scoped(target)))
                or _first(markets, lambda m: m.address.lower() == address)
            )

        name = token_out.lower()
        return _first(markets, lambda m: m.name.lower() == name)

    def resolve(
        self,
        token_out: str,
        operation: Union[OperationType, str],
        markets: Sequence[Market],
    ) -> Union[ResolvedDerivative, ResolutionError]:
        target = DerivativeField.for_operation(OperationType(operation))
        market = self.find_market(token_out, target, markets)

        if market is None:
            kind = target.label if is_evm_address(token_out) else MARKET_SYMBOL
            logger.info("No %s market for %s on chain %s", target.value, token_out, self.chain_id)
            return ResolutionError(kind=kind, identifier=token_out)

        raw = market.scoped(target)
        address = ChainScopedId.strip_prefix(raw, self.chain_id)
        return ResolvedDerivative(
            field=target,
            address=address.lower() if address is not None else raw,
            chain_id=self.chain_id,
            market=market,
        )
