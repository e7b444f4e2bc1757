"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tokenmeta.api.routes import health_router, token_legacy_router, token_router
from tokenmeta.client import TokenMetaClient
from tokenmeta.config import TokenMetaSettings
from tokenmeta.core.exceptions import (
    AllEndpointsFailedError,
    EncodeError,
    MetadataError,
    TokenMetaError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Opens the shared token client on startup and closes it on shutdown.
    """
    settings: TokenMetaSettings = app.state.settings
    logging.getLogger("tokenmeta").setLevel(settings.log_level.upper())

    logger.info(f"Initializing token client with {len(settings.rpc_endpoints)} RPC endpoints...")
    async with TokenMetaClient(settings) as client:
        app.state.token_client = client
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")
        app.state.token_client = None

    logger.info("Application shutdown complete")


def status_for_error(exc: TokenMetaError) -> int:
    """Map a library error to an HTTP status code."""
    if isinstance(exc, (ValidationError, EncodeError)):
        return 400
    if isinstance(exc, (AllEndpointsFailedError, MetadataError)):
        return 502
    return 500


async def token_error_handler(request: Request, exc: TokenMetaError) -> JSONResponse:
    """Render library errors as {"error": message}."""
    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


def create_app(
    settings: TokenMetaSettings | None = None,
    *,
    title: str = "Tokenmeta API",
    description: str = "On-chain token metadata resolution API",
    version: str = "0.1.0",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If not provided, loaded from environment.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version

    Returns:
        Configured FastAPI application
    """
    settings = settings or TokenMetaSettings()

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings
    app.state.token_client = None

    # Public read-only API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TokenMetaError, token_error_handler)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(token_router, prefix="/api/v1")
    app.include_router(token_legacy_router, prefix="/api")

    return app


# For uvicorn direct execution
app = create_app()
