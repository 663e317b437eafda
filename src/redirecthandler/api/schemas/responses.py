"""API response schemas."""

from __future__ import annotations

from typing import Literal

from redirecthandler.api.schemas.base import APIBaseSchema


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    resolver_count: int
    fallback_page: str | None = None


class ReadyResponse(APIBaseSchema):
    """Readiness check response."""

    ready: bool
