"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokenmeta.core.models import RpcConfig

DEFAULT_RPC_ENDPOINTS = [
    "https://cloudflare-eth.com",
    "https://rpc.ankr.com/eth",
    "https://ethereum.publicnode.com",
    "https://1rpc.io/eth",
]


class TokenMetaSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="TOKENMETA_",
    )

    # Chain
    rpc_endpoints: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RPC_ENDPOINTS),
        description="JSON-RPC endpoints, tried in order",
    )
    contract_address: str = Field(
        default="0x9eb6e2025b64f340691e424b7fe7022ffde12438",
        description="Token contract queried for tokenURI",
    )
    block_tag: str = Field(
        default="latest",
        description="Block tag used for eth_call",
    )
    rpc_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound in seconds for a single endpoint attempt",
    )

    # Metadata
    ipfs_gateway: str = Field(
        default="https://cloudflare-ipfs.com/ipfs/",
        description="Public gateway prefix for ipfs:// references",
    )
    metadata_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Timeout in seconds for metadata document fetches",
    )
    default_name_template: str = Field(
        default="Normie #{token_id}",
        description="Name used when the metadata document has none",
    )
    pixel_trait_label: str = Field(
        default="Pixel Count",
        description="Attribute label holding the pixel count",
    )

    # API
    max_token_id: int = Field(
        default=9999,
        ge=0,
        description="Largest token identifier accepted by the HTTP API",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    def rpc_config(self) -> RpcConfig:
        """Build the immutable RPC configuration."""
        return RpcConfig(
            endpoints=tuple(self.rpc_endpoints),
            contract_address=self.contract_address,
            block_tag=self.block_tag,
            timeout=self.rpc_timeout,
        )


@lru_cache
def get_settings() -> TokenMetaSettings:
    """Get cached settings instance."""
    return TokenMetaSettings()
