"""
Error Classification

Exceptions raised by external collaborators (token data, market data and the
transaction API). Resolution misses are not exceptions; they are returned as
``ResolutionError`` values by the resolvers.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Categories of errors surfaced to callers."""

    NETWORK = "network"           # Network/connectivity issues
    PROVIDER = "provider"         # External provider returned an error
    TRANSACTION_API = "transaction_api"  # Transaction builder rejected the intent


class TxIntentError(Exception):
    """Base class for collaborator failures."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.PROVIDER,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.details = details or {}


class ProviderError(TxIntentError):
    """Token or market data provider failure."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        category: ErrorCategory = ErrorCategory.PROVIDER,
    ):
        super().__init__(
            message,
            category=category,
            details={"provider": provider, "status_code": status_code},
        )
        self.provider = provider
        self.status_code = status_code


class TransactionAPIError(TxIntentError):
    """The transaction-building service failed or returned nothing."""

    def __init__(
        self,
        message: str,
        action_key: Optional[str] = None,
        status_code: Optional[int] = None,
        category: ErrorCategory = ErrorCategory.TRANSACTION_API,
    ):
        super().__init__(
            message,
            category=category,
            details={"action_key": action_key, "status_code": status_code},
        )
        self.action_key = action_key
        self.status_code = status_code
