from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..core.chain_types import ChainId
from ..core.resolution.models import Market


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: int = 10

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class TokenDataProvider(Provider):
    """Provider for symbol → contract address lookups"""

    @abstractmethod
    async def get_token_by_symbol(self, symbol: str, chain: str) -> Optional[Dict[str, Dict[str, Any]]]:
        """Return ``{chain: {"tokenAddress": ...}}`` or None when unknown"""
        pass

    async def get_token_address_by_symbol(self, symbol: str, chain: str) -> Optional[str]:
        """Return the token's address on ``chain`` or None"""
        token = await self.get_token_by_symbol(symbol, chain)
        if not token:
            return None
        return (token.get(chain) or {}).get("tokenAddress") or None


class MarketDataProvider(Provider):
    """Provider for per-chain yield market listings"""

    @abstractmethod
    async def get_markets(self, chain_id: ChainId) -> List[Market]:
        """Return the full market snapshot for a chain"""
        pass
