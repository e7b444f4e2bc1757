"""Integration test fixtures for the ASGI application."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
import respx
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tokenmeta.api import create_app
from tokenmeta.client import TokenMetaClient
from tokenmeta.config import TokenMetaSettings

# ============================================================================
# Upstream Mocking Fixtures
# ============================================================================


@pytest.fixture
def upstream() -> respx.MockRouter:
    """
    Mock the RPC endpoints and the IPFS gateway.

    respx patches the network transport only, so requests to the ASGI
    test app are not intercepted.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
async def test_app(settings: TokenMetaSettings) -> AsyncIterator[FastAPI]:
    """Create the application with an open token client in app state."""
    app = create_app(settings)

    # ASGITransport does not run the lifespan
    async with TokenMetaClient(settings) as client:
        app.state.token_client = client
        yield app
        app.state.token_client = None


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ============================================================================
# Marker Registration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test exercising the ASGI app",
    )
