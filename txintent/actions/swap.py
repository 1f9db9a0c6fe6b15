"""1inch swap: normalize both tokens and forward the intent."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..core.resolution import AddressNormalizer, SwapInputs, assemble_swap
from ..core.toolkit import ActionContext, ActionDefinition, ActionParameter, ActionParameterType
from ..providers.transaction_api import TransactionAPI
from ..services.address import normalize_chain
from ..types.envelope import ResultEnvelope

logger = logging.getLogger(__name__)

SWAP_DEFINITION = ActionDefinition(
    name="swap",
    description="Swap tokens on any EVM compatible blockchain (e.g. Ethereum, Base, etc.) using 1inch",
    parameters=[
        ActionParameter(
            name="chain",
            type=ActionParameterType.STRING,
            description="Chain name, e.g. ethereum, base, etc.",
        ),
        ActionParameter(
            name="inputToken",
            type=ActionParameterType.STRING,
            description="Input token address or contract address or symbol or ticker",
        ),
        ActionParameter(
            name="outputToken",
            type=ActionParameterType.STRING,
            description="Output token address or contract address or symbol or ticker",
        ),
        ActionParameter(
            name="amount",
            type=ActionParameterType.NUMBER,
            description="Amount of input token to swap",
        ),
        ActionParameter(
            name="slippage",
            type=ActionParameterType.NUMBER,
            description="Slippage percentage, default is 1 (which means 1%)",
            required=False,
        ),
    ],
)


class SwapAction:
    """Handler for ``swap``. Unknown symbols are forwarded unchanged."""

    definition = SWAP_DEFINITION

    def __init__(self, normalizer: AddressNormalizer, tx_api: TransactionAPI):
        self.normalizer = normalizer
        self.tx_api = tx_api

    async def __call__(self, ctx: ActionContext, payload: Dict[str, Any]) -> ResultEnvelope:
        try:
            chain = payload["chain"]
            lookup_chain = normalize_chain(chain)

            inputs = SwapInputs(
                chain=chain,
                input_token=await self.normalizer.normalize(payload["inputToken"], lookup_chain),
                output_token=await self.normalizer.normalize(payload["outputToken"], lookup_chain),
                amount=payload["amount"],
                slippage=payload.get("slippage"),
            )
            assembled = assemble_swap(inputs)
            result = await self.tx_api.create_transaction(assembled.action_key, ctx, assembled.payload)
            return ResultEnvelope.ok(result)
        except Exception as e:
            logger.error(f"Swap failed: {e}")
            return ResultEnvelope.fail(f"Failed to create transaction: {e}")
