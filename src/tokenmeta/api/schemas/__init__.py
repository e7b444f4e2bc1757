"""API schema definitions."""

from tokenmeta.api.schemas.base import APIBaseSchema, APIError
from tokenmeta.api.schemas.responses import HealthResponse, TokenResponse

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    # Responses
    "HealthResponse",
    "TokenResponse",
]
