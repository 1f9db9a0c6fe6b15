from typing import Any, Dict

from fastapi import APIRouter

from ..providers.dexscreener import DexScreenerProvider
from ..providers.pendle import PendleMarketProvider

router = APIRouter()


@router.get("/healthz")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint that verifies provider status"""

    providers = [DexScreenerProvider(), PendleMarketProvider()]
    provider_status = {provider.name: await provider.health_check() for provider in providers}

    available_providers = sum(
        1 for status in provider_status.values()
        if status["status"] == "healthy"
    )

    return {
        "status": "healthy" if available_providers == len(provider_status) else "degraded",
        "providers": provider_status,
        "available_providers": available_providers,
        "total_providers": len(provider_status),
    }
