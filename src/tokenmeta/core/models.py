"""Domain models for token metadata resolution."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .types import FailureReason

# Unstructured metadata JSON as published by the token contract
MetadataDocument = dict[str, Any]


class RpcConfig(BaseModel):
    """Immutable chain access configuration."""

    model_config = ConfigDict(frozen=True)

    endpoints: tuple[str, ...] = Field(..., description="RPC URLs in failover order")
    contract_address: str = Field(..., description="Contract queried for tokenURI")
    block_tag: str = Field(default="latest", description="Block tag for eth_call")
    timeout: float = Field(default=10.0, gt=0, description="Per-endpoint attempt bound (s)")


class CallRequest(BaseModel):
    """A read-only contract call."""

    model_config = ConfigDict(frozen=True)

    to: str = Field(..., description="Target contract address")
    data: str = Field(..., description="0x-prefixed calldata")
    block_tag: str = Field(default="latest", description="Block to read state at")

    def to_params(self) -> list[Any]:
        """Return the eth_call params list."""
        return [{"to": self.to, "data": self.data}, self.block_tag]


class EndpointFailure(BaseModel):
    """One failed attempt against one RPC endpoint."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    reason: FailureReason
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.endpoint}: {self.reason.value}: {self.message}"


class Attribute(BaseModel):
    """A single metadata attribute."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: Any = None


class TraitSummary(BaseModel):
    """Traits extracted from a metadata document."""

    model_config = ConfigDict(frozen=True)

    pixel_count: int | None = Field(default=None, description="Pixel Count trait, if parseable")
    image_url: str = Field(default="", description="Image URL with IPFS rewritten to the gateway")


class ResolutionResult(BaseModel):
    """Final resolved record for one token."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Token identifier, as requested")
    name: str = Field(..., description="Token name or synthesized default")
    pixel_count: int | None = Field(default=None, description="Pixel Count trait")
    image_url: str = Field(default="", description="Resolved image URL")
