import os

from pathlib import Path
from typing import Any, Dict

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Pick up the legacy toolkit key name used by older deployments."""

        super().model_post_init(__context)

        if not self.toolkit_api_key:
            fallback = os.getenv("UNIFAI_API_KEY")
            if fallback:
                object.__setattr__(self, "toolkit_api_key", fallback)

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON (console renderer when off or at DEBUG)")

    # Toolkit
    toolkit_name: str = Field(default="txintent", description="Toolkit name reported to the registry")
    toolkit_description: str = Field(
        default="Swap tokens with 1inch and mint Pendle SY/PT/YT on EVM chains",
        description="Toolkit description reported to the registry",
    )
    toolkit_api_key: str = Field(
        default="",
        description="API key for the toolkit and transaction API",
        validation_alias=AliasChoices("toolkit_api_key", "TOOLKIT_API_KEY"),
    )

    # External endpoints
    transaction_api_base_url: str = Field(
        default="https://txbuilder.unifai.network/api",
        description="Base URL of the transaction-building service",
    )
    pendle_api_base_url: str = Field(
        default="https://api-v2.pendle.finance/core",
        description="Base URL of the Pendle market API",
    )
    dexscreener_base_url: str = Field(
        default="https://api.dexscreener.com",
        description="Base URL of the DexScreener token search API",
    )
    request_timeout_seconds: int = Field(default=30, description="Request timeout")

    # Action defaults
    default_slippage: float = Field(
        default=0.05,
        ge=0,
        le=1,
        description="Slippage used by mint when the caller omits it (0-1 scale)",
    )
    chain_ids: Dict[str, int] = Field(
        default_factory=lambda: {
            "ethereum": 1,
            "base": 8453,
            "bsc": 56,
            "arbitrum": 42161,
        },
        description="Chain name to chain id table used for market lookups",
    )

    @property
    def has_toolkit_key(self) -> bool:
        return bool(self.toolkit_api_key)


# Global settings instance
settings = Settings()
