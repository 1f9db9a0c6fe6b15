"""Async client for Pendle's public market API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..core.chain_types import ChainId
from ..core.errors import ErrorCategory, ProviderError
from ..core.resolution.models import Market
from .base import MarketDataProvider

logger = logging.getLogger(__name__)


class PendleMarketProvider(MarketDataProvider):
    """Thin wrapper around https://api-v2.pendle.finance/core market endpoints."""

    name = "pendle"
    timeout_s = 20

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout_s: Optional[int] = None,
    ) -> None:
        self.base_url = (base_url or settings.pendle_api_base_url).rstrip("/")
        self.client = client
        if timeout_s is not None:
            self.timeout_s = timeout_s

    async def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            if self.client is not None:
                response = await self.client.get(url, timeout=self.timeout_s)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                    response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                f"Pendle returned {exc.response.status_code} for {path}",
                provider=self.name,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise ProviderError(
                f"Pendle request failed: {exc}",
                provider=self.name,
                category=ErrorCategory.NETWORK,
            ) from exc

    async def health_check(self) -> Dict[str, Any]:
        try:
            await self._get("/v1/chains")
            return {"status": "healthy"}
        except ProviderError as e:
            return {"status": "error", "reason": str(e)}

    async def get_markets(self, chain_id: ChainId) -> List[Market]:
        """Active markets on ``chain_id``; the whole list, no pagination.

        Response shape: ``{"markets": [{"name", "address", "sy", "yt", "pt", "expiry", ...}]}``
        with ``sy``/``yt``/``pt`` as ``{chainId}-{address}`` ids.
        """
        data = await self._get(f"/v1/{int(chain_id)}/markets/active")
        raw_markets = data.get("markets") if isinstance(data, dict) else data
        markets = [Market.from_api(item) for item in raw_markets or [] if isinstance(item, dict)]
        logger.debug("Fetched %d Pendle markets for chain %s", len(markets), chain_id)
        return markets
