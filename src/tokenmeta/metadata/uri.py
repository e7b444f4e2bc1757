"""Token URI scheme detection and IPFS gateway rewriting."""

from __future__ import annotations

from tokenmeta.core.types import UriScheme

DATA_BASE64_PREFIX = "data:application/json;base64,"
DATA_JSON_PREFIX = "data:application/json,"
IPFS_PREFIX = "ipfs://"

# Most specific first; anything unmatched is a plain network location
_PREFIXES: tuple[tuple[str, UriScheme], ...] = (
    (DATA_BASE64_PREFIX, UriScheme.DATA_BASE64),
    (DATA_JSON_PREFIX, UriScheme.DATA_JSON),
    (IPFS_PREFIX, UriScheme.IPFS),
)


def classify_uri(uri: str) -> UriScheme:
    """Determine how a token URI should be resolved."""
    for prefix, scheme in _PREFIXES:
        if uri.startswith(prefix):
            return scheme
    return UriScheme.HTTP


def strip_scheme(uri: str, scheme: UriScheme) -> str:
    """Return the part of the URI that follows the scheme prefix."""
    for prefix, candidate in _PREFIXES:
        if candidate == scheme:
            return uri[len(prefix) :]
    return uri


def gateway_url(cid: str, gateway: str) -> str:
    """Build the gateway URL for a content identifier."""
    return gateway + cid


def ipfs_to_gateway(uri: str, gateway: str) -> str:
    """Rewrite an ipfs:// reference to a gateway URL; other URLs are unchanged."""
    if classify_uri(uri) is UriScheme.IPFS:
        return gateway_url(strip_scheme(uri, UriScheme.IPFS), gateway)
    return uri
