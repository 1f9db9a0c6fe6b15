"""Turn a token reference (address or ticker) into a contract address."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ...services.address import is_evm_address

if TYPE_CHECKING:
    from ...providers.base import TokenDataProvider

logger = logging.getLogger(__name__)


class AddressNormalizer:
    """
    Resolves token references against a TokenDataProvider.

    Address-shaped references never reach the provider and come back exactly
    as given. Provider errors propagate to the caller.
    """

    def __init__(self, token_provider: "TokenDataProvider"):
        self._tokens = token_provider

    async def resolve(self, token_ref: str, chain: str) -> Optional[str]:
        """Address for ``token_ref`` on ``chain``, or None when the provider has none."""
        if is_evm_address(token_ref):
            return token_ref

        token = await self._tokens.get_token_by_symbol(token_ref, chain)
        address = ((token or {}).get(chain) or {}).get("tokenAddress")
        if not address:
            logger.info("Token %s has no address on %s", token_ref, chain)
            return None
        return address

    async def normalize(self, token_ref: str, chain: str) -> str:
        """Like ``resolve`` but falls back to the caller's literal string."""
        # Unresolved symbols are forwarded as-is; the transaction API decides.
        return await self.resolve(token_ref, chain) or token_ref
