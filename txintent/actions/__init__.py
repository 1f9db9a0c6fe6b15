from typing import Optional

from ..config import Settings, settings
from ..core.resolution import AddressNormalizer
from ..core.toolkit import ActionRegistry
from ..providers.base import MarketDataProvider, TokenDataProvider
from ..providers.dexscreener import DexScreenerProvider
from ..providers.pendle import PendleMarketProvider
from ..providers.transaction_api import TransactionAPI
from .mint import MintAction
from .swap import SwapAction


def build_registry(
    token_provider: TokenDataProvider,
    market_provider: MarketDataProvider,
    tx_api: TransactionAPI,
    config: Optional[Settings] = None,
) -> ActionRegistry:
    """Wire the swap and mint actions to their collaborators."""
    config = config or settings
    normalizer = AddressNormalizer(token_provider)

    registry = ActionRegistry()
    swap = SwapAction(normalizer, tx_api)
    mint = MintAction(
        normalizer,
        market_provider,
        tx_api,
        chain_ids=config.chain_ids,
        default_slippage=config.default_slippage,
    )
    registry.register(swap.definition, swap)
    registry.register(mint.definition, mint)
    return registry


# Singleton instance
_registry: Optional[ActionRegistry] = None


def get_action_registry() -> ActionRegistry:
    """Get the process-wide registry backed by the live providers."""
    global _registry
    if _registry is None:
        _registry = build_registry(
            token_provider=DexScreenerProvider(timeout_s=settings.request_timeout_seconds),
            market_provider=PendleMarketProvider(timeout_s=settings.request_timeout_seconds),
            tx_api=TransactionAPI(),
        )
    return _registry


__all__ = ["MintAction", "SwapAction", "build_registry", "get_action_registry"]
