"""Main library client for standalone usage."""

from __future__ import annotations

import logging

import httpx

from tokenmeta.chain.abi import decode_string, encode_call
from tokenmeta.chain.rpc import RpcFailoverClient
from tokenmeta.config import TokenMetaSettings
from tokenmeta.core.models import CallRequest, MetadataDocument, ResolutionResult
from tokenmeta.metadata.resolver import MetadataResolver
from tokenmeta.metadata.traits import TraitExtractor

logger = logging.getLogger(__name__)


class TokenMetaClient:
    """
    Main client for the tokenmeta library.

    Resolves a token id to its name, pixel count and image URL by reading
    tokenURI from the chain and following it to the metadata document.

    Usage:
        async with TokenMetaClient() as client:
            result = await client.resolve(5)
            print(result.name, result.pixel_count, result.image_url)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: TokenMetaSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            http_client: Shared HTTP client. If not provided, one is created and
                closed with this client.
        """
        self._settings = settings or TokenMetaSettings()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._rpc: RpcFailoverClient | None = None
        self._resolver: MetadataResolver | None = None
        self._extractor = TraitExtractor(
            self._settings.ipfs_gateway,
            target_label=self._settings.pixel_trait_label,
        )

    @property
    def settings(self) -> TokenMetaSettings:
        return self._settings

    async def __aenter__(self) -> TokenMetaClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                headers={"User-Agent": "tokenmeta/0.1"},
                follow_redirects=True,
            )
            self._owns_http_client = True

        self._rpc = RpcFailoverClient(self._settings.rpc_config(), self._http_client)
        self._resolver = MetadataResolver(
            self._settings.ipfs_gateway,
            self._http_client,
            timeout=self._settings.metadata_timeout,
        )

    async def close(self) -> None:
        """Close all resources."""
        self._rpc = None
        self._resolver = None

        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._rpc is None or self._resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with TokenMetaClient() as client:'"
            )

    def default_name(self, token_id: int) -> str:
        """Name used when the metadata document does not provide one."""
        return self._settings.default_name_template.format(token_id=token_id)

    async def read_token_uri(self, token_id: int) -> str | None:
        """
        Read tokenURI(token_id) from the configured contract.

        Returns:
            The token URI, or None if the contract returned no string

        Raises:
            EncodeError: If token_id is not a uint256
            AllEndpointsFailedError: If no RPC endpoint answered
        """
        self._ensure_initialized()

        request = CallRequest(
            to=self._settings.contract_address,
            data=encode_call(token_id),
            block_tag=self._settings.block_tag,
        )
        raw = await self._rpc.eth_call(request)
        return decode_string(raw if isinstance(raw, str) else None)

    async def fetch_metadata(self, token_id: int) -> MetadataDocument:
        """Fetch the metadata document for a token; empty if it has no URI."""
        self._ensure_initialized()

        token_uri = await self.read_token_uri(token_id)
        if not token_uri:
            logger.warning(f"Token {token_id} has an empty tokenURI")
            return {}

        return await self._resolver.fetch(token_uri)

    async def resolve(self, token_id: int) -> ResolutionResult:
        """
        Resolve a token to its display record.

        Args:
            token_id: Token identifier

        Returns:
            Resolution result; name falls back to the default template

        Raises:
            EncodeError, AllEndpointsFailedError, MetadataFetchError,
            MetadataParseError
        """
        metadata = await self.fetch_metadata(token_id)
        traits = self._extractor.extract(metadata)

        name = metadata.get("name")
        if not name or not isinstance(name, str):
            name = self.default_name(token_id)

        return ResolutionResult(
            id=token_id,
            name=name,
            pixel_count=traits.pixel_count,
            image_url=traits.image_url,
        )


# Convenience function for one-off resolutions
async def resolve_token(
    token_id: int,
    *,
    settings: TokenMetaSettings | None = None,
) -> ResolutionResult:
    """
    Resolve a token (convenience function).

    For multiple resolutions, use TokenMetaClient for better performance.
    """
    async with TokenMetaClient(settings) as client:
        return await client.resolve(token_id)
