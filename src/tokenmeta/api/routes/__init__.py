"""API route modules."""

from tokenmeta.api.routes.health import router as health_router
from tokenmeta.api.routes.token import legacy_router as token_legacy_router
from tokenmeta.api.routes.token import router as token_router

__all__ = [
    "health_router",
    "token_legacy_router",
    "token_router",
]
