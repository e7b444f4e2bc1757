"""Metadata document resolver for token URIs."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from urllib.parse import unquote

import httpx

from tokenmeta.core.exceptions import MetadataFetchError, MetadataParseError
from tokenmeta.core.models import MetadataDocument
from tokenmeta.core.types import UriScheme
from tokenmeta.metadata.uri import classify_uri, gateway_url, strip_scheme

logger = logging.getLogger(__name__)


def _ensure_document(data: object, source: str) -> MetadataDocument:
    """Check that parsed JSON is an object."""
    if not isinstance(data, dict):
        raise MetadataParseError(
            f"Metadata from {source} is a JSON {type(data).__name__}, expected an object",
            source=source,
        )
    return data


def parse_json_document(text: str, source: str) -> MetadataDocument:
    """Parse a JSON metadata document."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise MetadataParseError(
            f"Metadata from {source} is not valid JSON: {e}",
            source=source,
        ) from e
    return _ensure_document(data, source)


def decode_base64_document(encoded: str) -> MetadataDocument:
    """Decode base64 JSON embedded in a data: URI."""
    source = "data:application/json;base64"
    padded = encoded.strip() + "=" * (-len(encoded.strip()) % 4)
    try:
        text = base64.b64decode(padded).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise MetadataParseError(
            f"Embedded metadata is not valid base64 UTF-8: {e}",
            source=source,
        ) from e
    return parse_json_document(text, source)


def decode_percent_document(encoded: str) -> MetadataDocument:
    """Decode percent-encoded JSON embedded in a data: URI."""
    return parse_json_document(unquote(encoded), "data:application/json")


class MetadataResolver:
    """
    Fetches the metadata document a token URI points to.

    Embedded data: URIs are decoded locally; ipfs:// references go through
    a single public gateway; anything else is fetched directly. No retries.
    """

    def __init__(
        self,
        gateway: str,
        http_client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 15.0,
    ) -> None:
        self.gateway = gateway
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": "tokenmeta/0.1", "Accept": "application/json"},
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch(self, uri: str) -> MetadataDocument:
        """
        Resolve a token URI to its metadata document.

        Raises:
            MetadataFetchError: If the document cannot be retrieved
            MetadataParseError: If the document is not a JSON object
        """
        scheme = classify_uri(uri)
        logger.debug(f"Resolving {scheme.value} token URI")

        match scheme:
            case UriScheme.DATA_BASE64:
                return decode_base64_document(strip_scheme(uri, scheme))
            case UriScheme.DATA_JSON:
                return decode_percent_document(strip_scheme(uri, scheme))
            case UriScheme.IPFS:
                return await self.fetch_url(gateway_url(strip_scheme(uri, scheme), self.gateway))
            case UriScheme.HTTP:
                return await self.fetch_url(uri)

    async def fetch_url(self, url: str) -> MetadataDocument:
        """GET a metadata document over HTTP(S)."""
        client = self._get_client()

        try:
            response = await client.get(url, timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise MetadataFetchError(
                f"Failed to fetch metadata from {url}: {e}",
                url=url,
            ) from e

        if not response.is_success:
            raise MetadataFetchError(
                f"Metadata fetch from {url} returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MetadataParseError(
                f"Metadata from {url} is not valid JSON: {e}",
                source=url,
            ) from e

        return _ensure_document(data, url)

    async def __aenter__(self) -> MetadataResolver:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
