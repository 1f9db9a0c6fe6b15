"""DexScreener token lookups used to turn symbols into contract addresses."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..core.errors import ErrorCategory, ProviderError
from .base import TokenDataProvider

logger = logging.getLogger(__name__)


def _liquidity_usd(pair: Dict[str, Any]) -> float:
    liquidity = pair.get("liquidity") or {}
    try:
        return float(liquidity.get("usd") or 0.0)
    except (TypeError, ValueError):
        return 0.0


class DexScreenerProvider(TokenDataProvider):
    """Resolve a ticker to the most liquid matching token on a chain."""

    name = "dexscreener"
    timeout_s = 15

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout_s: Optional[int] = None,
    ) -> None:
        self.base_url = (base_url or settings.dexscreener_base_url).rstrip("/")
        self.client = client
        if timeout_s is not None:
            self.timeout_s = timeout_s

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            if self.client is not None:
                response = await self.client.get(url, params=params, timeout=self.timeout_s)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                    response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                f"DexScreener returned {exc.response.status_code} for {path}",
                provider=self.name,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise ProviderError(
                f"DexScreener request failed: {exc}",
                provider=self.name,
                category=ErrorCategory.NETWORK,
            ) from exc

    async def health_check(self) -> Dict[str, Any]:
        try:
            await self._get("/latest/dex/search", params={"q": "WETH"})
            return {"status": "healthy"}
        except ProviderError as e:
            return {"status": "error", "reason": str(e)}

    async def search_pairs(self, query: str) -> List[Dict[str, Any]]:
        data = await self._get("/latest/dex/search", params={"q": query})
        pairs = data.get("pairs") if isinstance(data, dict) else None
        return [p for p in pairs or [] if isinstance(p, dict)]

    async def get_token_by_symbol(self, symbol: str, chain: str) -> Optional[Dict[str, Dict[str, Any]]]:
        """
        Find ``symbol`` on ``chain``.

        Among pairs on the chain whose base token symbol matches
        case-insensitively, the one with the deepest USD liquidity wins.
        Returns ``{chain: {"tokenAddress", "symbol", "name"}}`` or None.
        """
        wanted = symbol.strip().lower()
        candidates = [
            pair
            for pair in await self.search_pairs(symbol)
            if str(pair.get("chainId", "")).lower() == chain.lower()
            and str((pair.get("baseToken") or {}).get("symbol", "")).lower() == wanted
        ]
        if not candidates:
            logger.debug("No DexScreener match for %s on %s", symbol, chain)
            return None

        best = max(candidates, key=_liquidity_usd)
        base_token = best["baseToken"]
        return {
            chain: {
                "tokenAddress": base_token.get("address"),
                "symbol": base_token.get("symbol"),
                "name": base_token.get("name"),
            }
        }
