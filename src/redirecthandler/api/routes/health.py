"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from redirecthandler import __version__
from redirecthandler.api.dependencies import Dispatcher
from redirecthandler.api.schemas import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Report whether the fallback dispatcher is configured.",
)
async def health_check(dispatcher: Dispatcher) -> HealthResponse:
    """Check API health status."""
    if dispatcher is None:
        return HealthResponse(status="unhealthy", version=__version__, resolver_count=0)

    return HealthResponse(
        status="healthy",
        version=__version__,
        resolver_count=len(dispatcher.pool),
        fallback_page=dispatcher.config.default_fallback_page,
    )


@router.get(
    "/ready",
    response_model=ReadyResponse,
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(dispatcher: Dispatcher) -> ReadyResponse:
    """Check if API is ready to serve traffic."""
    return ReadyResponse(ready=dispatcher is not None)
