from .models import (
    AssembledTransaction,
    DerivativeField,
    Market,
    OperationType,
    ResolutionError,
    ResolvedDerivative,
)
from .normalizer import AddressNormalizer
from .market_resolver import MarketResolver
from .assembler import (
    MINT_ACTION_KEYS,
    SWAP_ACTION_KEY,
    MintInputs,
    SwapInputs,
    assemble_mint,
    assemble_swap,
    stringify_amount,
)

__all__ = [
    "AddressNormalizer",
    "AssembledTransaction",
    "DerivativeField",
    "MINT_ACTION_KEYS",
    "Market",
    "MarketResolver",
    "MintInputs",
    "OperationType",
    "ResolutionError",
    "ResolvedDerivative",
    "SWAP_ACTION_KEY",
    "SwapInputs",
    "assemble_mint",
    "assemble_swap",
    "stringify_amount",
]
