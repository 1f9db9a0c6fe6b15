import httpx
import pytest

from txintent.core.errors import ErrorCategory, ProviderError
from txintent.providers.pendle import PendleMarketProvider


MARKETS_RESPONSE = {
    "markets": [
        {
            "name": "wstETH",
            "address": "0xmarket",
            "expiry": "2026-12-25T00:00:00.000Z",
            "pt": "8453-0xpt",
            "yt": "8453-0xyt",
            "sy": "8453-0xsy",
            "underlyingAsset": "8453-0xunderlying",
        },
        "garbage",
    ]
}


def make_provider(handler) -> PendleMarketProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PendleMarketProvider(base_url="https://pendle.test/core", client=client)


@pytest.mark.asyncio
async def test_get_markets_parses_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        return httpx.Response(200, json=MARKETS_RESPONSE)

    markets = await make_provider(handler).get_markets(8453)

    assert seen["path"] == "/core/v1/8453/markets/active"
    assert len(markets) == 1
    market = markets[0]
    assert market.name == "wstETH"
    assert market.address == "0xmarket"
    assert market.sy == "8453-0xsy"
    assert market.yt == "8453-0xyt"
    assert market.pt == "8453-0xpt"
    assert market.expiry == "2026-12-25T00:00:00.000Z"


@pytest.mark.asyncio
async def test_get_markets_http_error():
    provider = make_provider(lambda request: httpx.Response(500, text="upstream"))

    with pytest.raises(ProviderError) as exc_info:
        await provider.get_markets(1)

    assert exc_info.value.status_code == 500
    assert "Pendle returned 500" in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_markets_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ProviderError) as exc_info:
        await make_provider(handler).get_markets(56)

    assert exc_info.value.category == ErrorCategory.NETWORK
