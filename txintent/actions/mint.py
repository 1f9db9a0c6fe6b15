"""
Pendle mint.

Converts yield-bearing assets into SY, or splits SY into PT + YT. ``tokenOut``
is resolved against the chain's live market list into the YT (PTYT mints)
or SY (SY mints) address the transaction API expects.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from ..core.chain_types import ChainId, resolve_chain_id
from ..core.resolution import (
    AddressNormalizer,
    MarketResolver,
    MintInputs,
    OperationType,
    ResolutionError,
    assemble_mint,
)
from ..core.toolkit import ActionContext, ActionDefinition, ActionParameter, ActionParameterType
from ..providers.base import MarketDataProvider
from ..providers.transaction_api import TransactionAPI
from ..types.envelope import ResultEnvelope

logger = logging.getLogger(__name__)

MINT_CHAINS = ["ethereum", "base", "bsc"]
DEFAULT_MINT_SLIPPAGE = 0.05


def build_mint_definition(default_slippage: float = DEFAULT_MINT_SLIPPAGE) -> ActionDefinition:
    return ActionDefinition(
        name="mint",
        description=(
            "Convert yield-bearing assets into SY tokens or split SY into Principal Tokens (PT) "
            "and Yield Tokens (YT). This enables yield decomposition and flexible management "
            "of principal vs future income streams."
        ),
        parameters=[
            ActionParameter(
                name="chain",
                type=ActionParameterType.STRING,
                description=(
                    "Blockchain network identifier where the mint operation will execute "
                    "(e.g., 'ethereum', 'base'). Required to route the transaction correctly."
                ),
                enum=MINT_CHAINS,
            ),
            ActionParameter(
                name="type",
                type=ActionParameterType.STRING,
                description=(
                    "PTYT means mint PT & YT using tokens, only callable until the YT's expiry. "
                    "SY means mint SY using tokens."
                ),
                enum=[op.value for op in OperationType],
            ),
            ActionParameter(
                name="slippage",
                type=ActionParameterType.NUMBER,
                description=(
                    "Maximum acceptable price impact tolerance (0-1 scale). "
                    "For example: 0.01 = 1% slippage."
                ),
                required=False,
                default=default_slippage,
            ),
            ActionParameter(
                name="tokenOut",
                type=ActionParameterType.STRING,
                description=(
                    "Target token: an SY, PT or YT address, a market address, "
                    "or a market symbol"
                ),
            ),
            ActionParameter(
                name="tokenIn",
                type=ActionParameterType.STRING,
                description=(
                    "Input asset as symbol or contract address: a yield-bearing asset (e.g. stETH), "
                    "an SY contract, or a base token (e.g. USDC, ETH). Base tokens are wrapped "
                    "into SY by the protocol."
                ),
            ),
            ActionParameter(
                name="amountIn",
                type=ActionParameterType.STRING,
                description="Amount of tokenIn to process, e.g. '1.5' for 1.5 USDC.",
            ),
        ],
    )


class MintAction:
    """Handler for ``mint``. Unlike swap, an unresolvable ``tokenIn`` is an error."""

    def __init__(
        self,
        normalizer: AddressNormalizer,
        market_provider: MarketDataProvider,
        tx_api: TransactionAPI,
        chain_ids: Mapping[str, ChainId],
        default_slippage: float = DEFAULT_MINT_SLIPPAGE,
    ):
        self.normalizer = normalizer
        self.market_provider = market_provider
        self.tx_api = tx_api
        self.chain_ids = dict(chain_ids)
        self.default_slippage = default_slippage
        self.definition = build_mint_definition(default_slippage)

    async def __call__(self, ctx: ActionContext, payload: Dict[str, Any]) -> ResultEnvelope:
        try:
            chain = payload["chain"]
            operation = OperationType(payload["type"])
            token_in_ref = payload["tokenIn"]
            token_out = payload["tokenOut"]

            chain_id = resolve_chain_id(chain, self.chain_ids)
            if chain_id is None:
                return ResultEnvelope.fail(f"Unsupported chain: {chain}")

            token_in = await self.normalizer.resolve(token_in_ref, chain)
            if token_in is None:
                return ResultEnvelope.fail(ResolutionError(kind="Token", identifier=token_in_ref).message)

            markets = await self.market_provider.get_markets(chain_id)
            derivative = MarketResolver(chain_id).resolve(token_out, operation, markets)
            if isinstance(derivative, ResolutionError):
                return ResultEnvelope.fail(derivative.message)

            inputs = MintInputs(
                chain=chain,
                operation=operation,
                token_in=token_in,
                token_out=token_out,
                amount_in=payload["amountIn"],
                slippage=payload.get("slippage", self.default_slippage),
            )
            assembled = assemble_mint(inputs, derivative)
            result = await self.tx_api.create_transaction(assembled.action_key, ctx, assembled.payload)
            return ResultEnvelope.ok(result)
        except Exception as e:
            logger.error(f"Mint failed: {e}")
            return ResultEnvelope.fail(f"Failed to create transaction: {e}")
