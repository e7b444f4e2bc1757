"""Metadata layer: token URI resolution and trait extraction."""

from tokenmeta.metadata.resolver import MetadataResolver
from tokenmeta.metadata.traits import TraitExtractor, read_attributes
from tokenmeta.metadata.uri import classify_uri, gateway_url, ipfs_to_gateway, strip_scheme

__all__ = [
    # Resolver
    "MetadataResolver",
    # Traits
    "TraitExtractor",
    "read_attributes",
    # URIs
    "classify_uri",
    "gateway_url",
    "ipfs_to_gateway",
    "strip_scheme",
]
