from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator


class ResultEnvelope(BaseModel):
    """Action result: a transaction under ``data`` or a diagnostic under ``error``, never both."""

    data: Optional[Any] = Field(default=None, description="Transaction returned by the transaction API")
    error: Optional[str] = Field(default=None, description="Human-readable failure description")

    @model_validator(mode="after")
    def _exactly_one(self) -> "ResultEnvelope":
        if (self.data is None) == (self.error is None):
            raise ValueError("ResultEnvelope requires exactly one of data or error")
        return self

    @classmethod
    def ok(cls, data: Any) -> "ResultEnvelope":
        return cls(data=data)

    @classmethod
    def fail(cls, error: str) -> "ResultEnvelope":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error} if self.is_error else {"data": self.data}
