"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from tokenmeta.config import TokenMetaSettings
from tokenmeta.core.models import RpcConfig

RPC_A = "https://rpc-a.test/rpc"
RPC_B = "https://rpc-b.test/rpc"
RPC_C = "https://rpc-c.test/rpc"
GATEWAY = "https://gateway.test/ipfs/"
CONTRACT = "0x9eb6e2025b64f340691e424b7fe7022ffde12438"


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def settings() -> TokenMetaSettings:
    """Settings pointing at mocked endpoints, isolated from the environment."""
    return TokenMetaSettings(
        _env_file=None,
        rpc_endpoints=[RPC_A, RPC_B, RPC_C],
        contract_address=CONTRACT,
        ipfs_gateway=GATEWAY,
        rpc_timeout=5.0,
        metadata_timeout=5.0,
    )


@pytest.fixture
def rpc_config() -> RpcConfig:
    """RPC configuration with three endpoints."""
    return RpcConfig(
        endpoints=(RPC_A, RPC_B, RPC_C),
        contract_address=CONTRACT,
        timeout=5.0,
    )


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_metadata() -> dict[str, Any]:
    """Metadata document as served from IPFS for token 5."""
    return {
        "name": "Normie #5",
        "attributes": [
            {"trait_type": "Type", "value": "Human"},
            {"trait_type": "Pixel Count", "value": "123"},
        ],
        "image": "ipfs://Qmimg",
    }


@pytest.fixture
def sample_metadata_minimal() -> dict[str, Any]:
    """Metadata document with no name, traits, or image."""
    return {"description": "An unnamed token"}
