import pytest
from unittest.mock import AsyncMock, MagicMock

from txintent.core.resolution import AddressNormalizer
from tests.conftest import USDC_BASE


ADDRESS = "0xAbCdEf0123456789abcdef0123456789ABCDEF01"


class TestAddressNormalizer:

    @pytest.mark.asyncio
    async def test_address_passes_through_without_lookup(self, token_provider):
        normalizer = AddressNormalizer(token_provider)

        assert await normalizer.resolve(ADDRESS, "base") == ADDRESS
        assert await normalizer.normalize(ADDRESS, "base") == ADDRESS
        token_provider.get_token_by_symbol.assert_not_called()

    @pytest.mark.asyncio
    async def test_address_ignores_provider_answers(self):
        provider = MagicMock()
        provider.get_token_by_symbol = AsyncMock(
            return_value={"base": {"tokenAddress": "0x0000000000000000000000000000000000000001"}}
        )
        normalizer = AddressNormalizer(provider)

        assert await normalizer.normalize(ADDRESS, "base") == ADDRESS

    @pytest.mark.asyncio
    async def test_symbol_resolves_on_chain(self, token_provider):
        normalizer = AddressNormalizer(token_provider)

        assert await normalizer.resolve("USDC", "base") == USDC_BASE
        token_provider.get_token_by_symbol.assert_awaited_once_with("USDC", "base")

    @pytest.mark.asyncio
    async def test_unknown_symbol(self, token_provider):
        normalizer = AddressNormalizer(token_provider)

        assert await normalizer.resolve("NOPE", "base") is None
        assert await normalizer.normalize("NOPE", "base") == "NOPE"

    @pytest.mark.asyncio
    async def test_symbol_known_on_other_chain_only(self, token_provider):
        normalizer = AddressNormalizer(token_provider)

        assert await normalizer.resolve("USDC", "bsc") is None
        assert await normalizer.normalize("USDC", "bsc") == "USDC"

    @pytest.mark.asyncio
    async def test_provider_errors_propagate(self):
        provider = MagicMock()
        provider.get_token_by_symbol = AsyncMock(side_effect=RuntimeError("boom"))
        normalizer = AddressNormalizer(provider)

        with pytest.raises(RuntimeError, match="boom"):
            await normalizer.normalize("USDC", "base")
