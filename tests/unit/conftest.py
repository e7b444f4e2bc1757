"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any

import pytest
import respx
from httpx import Response

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Mock Response Helpers
# ============================================================================


def rpc_result(result: Any, request_id: int = 1) -> Response:
    """Create a successful JSON-RPC response."""
    return Response(
        status_code=200,
        json={"jsonrpc": "2.0", "id": request_id, "result": result},
    )


def rpc_error(message: str, code: int = -32000, request_id: int = 1) -> Response:
    """Create a JSON-RPC error response (HTTP 200 with an error payload)."""
    return Response(
        status_code=200,
        json={"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}},
    )


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "rpc_result": rpc_result,
        "rpc_error": rpc_error,
    }
