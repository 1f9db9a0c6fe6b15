import json

import httpx
import pytest

from txintent.core.errors import TransactionAPIError
from txintent.core.toolkit import ActionContext
from txintent.providers.transaction_api import TransactionAPI


def make_api(handler) -> TransactionAPI:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TransactionAPI(api_key="secret", base_url="https://tx.test/api", client=client)


@pytest.mark.asyncio
async def test_create_transaction_posts_intent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"txs": [{"to": "0xrouter"}]})

    result = await make_api(handler).create_transaction(
        "pendle/mint-sy",
        ActionContext(agent_id="agent", action_id="7"),
        {"chain": "base", "sy": "0xsy"},
    )

    assert result == {"txs": [{"to": "0xrouter"}]}
    assert seen["path"] == "/api/tx/create"
    assert seen["auth"] == "secret"
    assert seen["body"] == {
        "action": "pendle/mint-sy",
        "agentId": "agent",
        "actionId": "7",
        "payload": {"chain": "base", "sy": "0xsy"},
    }


@pytest.mark.asyncio
async def test_error_status_raises():
    api = make_api(lambda request: httpx.Response(422, text="amount must be positive"))

    with pytest.raises(TransactionAPIError) as exc_info:
        await api.create_transaction("1inch/swap", ActionContext(), {})

    assert exc_info.value.status_code == 422
    assert "amount must be positive" in str(exc_info.value)


@pytest.mark.asyncio
async def test_empty_response_raises():
    api = make_api(lambda request: httpx.Response(200))

    with pytest.raises(TransactionAPIError, match="empty response"):
        await api.create_transaction("1inch/swap", ActionContext(), {})
