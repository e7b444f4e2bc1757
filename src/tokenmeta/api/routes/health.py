"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from tokenmeta import __version__
from tokenmeta.api.dependencies import Settings
from tokenmeta.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Report configuration health without touching the network.",
)
async def health_check(request: Request, settings: Settings) -> HealthResponse:
    """Check API health status."""
    client = getattr(request.app.state, "token_client", None)
    if client is None:
        status = "unhealthy"
    elif not settings.rpc_endpoints:
        status = "degraded"
    else:
        status = "healthy"

    return HealthResponse(
        status=status,
        version=__version__,
        endpoints=len(settings.rpc_endpoints),
    )
