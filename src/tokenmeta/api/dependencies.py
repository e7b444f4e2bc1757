"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from tokenmeta.client import TokenMetaClient
from tokenmeta.config import TokenMetaSettings
from tokenmeta.core.exceptions import TokenMetaError


def get_settings(request: Request) -> TokenMetaSettings:
    """Get application settings from app state."""
    return request.app.state.settings


async def get_token_client(request: Request) -> TokenMetaClient:
    """
    Get the token metadata client from app state.

    Raises:
        TokenMetaError: If the application lifespan has not opened the client
    """
    client = getattr(request.app.state, "token_client", None)
    if client is None:
        raise TokenMetaError("Token client is not initialized")
    return client


# Type aliases for cleaner dependency injection
Settings = Annotated[TokenMetaSettings, Depends(get_settings)]
TokenClient = Annotated[TokenMetaClient, Depends(get_token_client)]
