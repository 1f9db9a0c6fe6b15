"""Async client for the transaction-building service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..core.errors import ErrorCategory, TransactionAPIError
from ..core.toolkit.context import ActionContext

logger = logging.getLogger(__name__)


class TransactionAPI:
    """Turns an action key plus resolved payload into a chain-ready transaction."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout_s: Optional[int] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.toolkit_api_key
        self.base_url = (base_url or settings.transaction_api_base_url).rstrip("/")
        self.client = client
        self.timeout_s = timeout_s or settings.request_timeout_seconds

    def _headers(self) -> Dict[str, str]:
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
        }
        if self.api_key:
            headers["authorization"] = self.api_key
        return headers

    async def _post(self, path: str, body: Dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}{path}"
        if self.client is not None:
            return await self.client.post(url, json=body, headers=self._headers(), timeout=self.timeout_s)
        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            return await client.post(url, json=body, headers=self._headers())

    async def create_transaction(
        self,
        action_key: str,
        ctx: ActionContext,
        payload: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Request a transaction for ``action_key``; raises TransactionAPIError on any failure."""

        body = {
            "action": action_key,
            "agentId": ctx.agent_id,
            "actionId": ctx.action_id,
            "payload": payload,
        }
        logger.info("Creating transaction %s", action_key)

        try:
            response = await self._post("/tx/create", body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text.strip() or exc.response.reason_phrase
            raise TransactionAPIError(
                f"{exc.response.status_code} {detail}",
                action_key=action_key,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise TransactionAPIError(
                f"transaction API unreachable: {exc}",
                action_key=action_key,
                category=ErrorCategory.NETWORK,
            ) from exc

        if not response.content:
            raise TransactionAPIError("empty response from transaction API", action_key=action_key)
        result = response.json()
        if not result:
            raise TransactionAPIError("empty response from transaction API", action_key=action_key)
        return result
