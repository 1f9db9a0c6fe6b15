"""
Payload Assembler

Builds the final (action key, payload) pair for the transaction API from
already-resolved inputs. Nothing here performs lookups; callers resolve
first and only assemble once every reference has been resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from .models import AssembledTransaction, OperationType, ResolvedDerivative

Amount = Union[str, int, float, Decimal]

MINT_ACTION_KEYS: Dict[OperationType, str] = {
    OperationType.PTYT: "pendle/mint",
    OperationType.SY: "pendle/mint-sy",
}
SWAP_ACTION_KEY = "1inch/swap"


def stringify_amount(amount: Amount) -> str:
    """
    Canonical string form of an amount.

    Strings pass through untouched; numbers render without exponent or a
    trailing ``.0``.

    Examples:
        >>> stringify_amount(1.5)
        '1.5'
        >>> stringify_amount(100.0)
        '100'
        >>> stringify_amount("1.50")
        '1.50'
    """
    if isinstance(amount, str):
        return amount
    if isinstance(amount, bool):
        raise TypeError("amount must be a number or string, not bool")
    if isinstance(amount, int):
        return str(amount)
    if isinstance(amount, float):
        if amount.is_integer():
            return str(int(amount))
        return format(Decimal(repr(amount)), "f")
    if isinstance(amount, Decimal):
        return format(amount, "f")
    raise TypeError(f"unsupported amount type: {type(amount).__name__}")


@dataclass(frozen=True)
class MintInputs:
    """Mint request after ``tokenIn`` has been resolved to an address."""

    chain: str
    operation: OperationType
    token_in: str
    token_out: str
    amount_in: Amount
    slippage: float


@dataclass(frozen=True)
class SwapInputs:
    """Swap request after both tokens have been normalized."""

    chain: str
    input_token: str
    output_token: str
    amount: Amount
    slippage: Optional[float] = None


def assemble_mint(inputs: MintInputs, derivative: ResolvedDerivative) -> AssembledTransaction:
    payload: Dict[str, Any] = {
        "chain": inputs.chain,
        "type": inputs.operation.value,
        "slippage": inputs.slippage,
        "tokenOut": inputs.token_out,
        "tokenIn": inputs.token_in,
        "amountIn": stringify_amount(inputs.amount_in),
        derivative.field.value: derivative.address,
    }
    return AssembledTransaction(action_key=MINT_ACTION_KEYS[inputs.operation], payload=payload)


def assemble_swap(inputs: SwapInputs) -> AssembledTransaction:
    payload: Dict[str, Any] = {
        "chain": inputs.chain,
        "inputToken": inputs.input_token,
        "outputToken": inputs.output_token,
        "amount": stringify_amount(inputs.amount),
    }
    if inputs.slippage is not None:
        payload["slippage"] = inputs.slippage
    return AssembledTransaction(action_key=SWAP_ACTION_KEY, payload=payload)
