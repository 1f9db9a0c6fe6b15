from typing import Dict, List, Optional

import pytest
from unittest.mock import AsyncMock, MagicMock

from txintent.core.resolution.models import Market


BASE_CHAIN_ID = 8453

USDC_BASE = "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913"
WSTETH_MARKET = "0x1111111111111111111111111111111111111111"
WSTETH_SY = "0x2222222222222222222222222222222222222222"
WSTETH_YT = "0x3333333333333333333333333333333333abcdef"
WSTETH_PT = "0x4444444444444444444444444444444444444444"
USDE_MARKET = "0x5555555555555555555555555555555555555555"
USDE_SY = "0x6666666666666666666666666666666666666666"
USDE_YT = "0x7777777777777777777777777777777777777777"


def make_market(
    name: str,
    address: str,
    sy: str,
    yt: str,
    chain_id: int = BASE_CHAIN_ID,
    pt: Optional[str] = None,
) -> Market:
    return Market(
        address=address,
        name=name,
        sy=f"{chain_id}-{sy}",
        yt=f"{chain_id}-{yt}",
        pt=f"{chain_id}-{pt}" if pt else None,
    )


@pytest.fixture
def markets() -> List[Market]:
    return [
        make_market("wstETH", WSTETH_MARKET, WSTETH_SY, WSTETH_YT, pt=WSTETH_PT),
        make_market("USDe", USDE_MARKET, USDE_SY, USDE_YT),
    ]


@pytest.fixture
def token_provider():
    """Token provider that knows USDC on base only."""
    known: Dict[str, Dict[str, str]] = {"usdc": {"base": USDC_BASE}}

    def get_token_by_symbol(symbol: str, chain: str):
        address = known.get(symbol.lower(), {}).get(chain)
        if not address:
            return None
        return {chain: {"tokenAddress": address}}

    provider = MagicMock()
    provider.get_token_by_symbol = AsyncMock(side_effect=get_token_by_symbol)
    return provider


@pytest.fixture
def market_provider(markets):
    provider = MagicMock()
    provider.get_markets = AsyncMock(return_value=markets)
    return provider


@pytest.fixture
def tx_api():
    api = MagicMock()
    api.create_transaction = AsyncMock(return_value={"txs": [{"to": "0xrouter", "data": "0x"}]})
    return api
