"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from tokenmeta.api.schemas.base import APIBaseSchema


class TokenResponse(APIBaseSchema):
    """Resolved token record."""

    id: int
    name: str
    pixel_count: int | None = None
    image_url: str


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    endpoints: int
