"""Typed models shared by the resolution pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..chain_types import ChainId


class OperationType(str, Enum):
    """Pendle mint flavours."""

    PTYT = "PTYT"  # split SY into PT + YT
    SY = "SY"      # wrap tokens into SY


class DerivativeField(str, Enum):
    """Market attribute (and payload field) a mint resolves to."""

    YT = "yt"
    SY = "sy"

    @classmethod
    def for_operation(cls, operation: OperationType) -> "DerivativeField":
        return cls.YT if operation == OperationType.PTYT else cls.SY

    @property
    def label(self) -> str:
        return f"{self.value.upper()} token"


@dataclass(frozen=True)
class Market:
    """One yield market on a chain. ``sy``/``yt``/``pt`` are chain-scoped ids."""

    address: str
    name: str
    sy: str
    yt: str
    pt: Optional[str] = None
    expiry: Optional[str] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Market":
        return cls(
            address=str(data.get("address") or ""),
            name=str(data.get("name") or ""),
            sy=str(data.get("sy") or ""),
            yt=str(data.get("yt") or ""),
            pt=data.get("pt"),
            expiry=data.get("expiry"),
        )

    def scoped(self, target: DerivativeField) -> str:
        return self.yt if target == DerivativeField.YT else self.sy


@dataclass(frozen=True)
class ResolutionError:
    """A reference that could not be resolved. Rendered verbatim to callers."""

    kind: str
    identifier: str

    @property
    def message(self) -> str:
        return f"{self.kind} {self.identifier} not found"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ResolvedDerivative:
    """Bare derivative address tagged with the payload field it belongs in."""

    field: DerivativeField
    address: str
    chain_id: ChainId
    market: Optional[Market] = None


@dataclass(frozen=True)
class AssembledTransaction:
    """Final action key and payload handed to the transaction API."""

    action_key: str
    payload: Dict[str, Any] = field(default_factory=dict)
