"""Tokenmeta - On-chain token metadata resolution library."""

from tokenmeta.chain.rpc import FailoverResult, RpcFailoverClient
from tokenmeta.client import TokenMetaClient, resolve_token
from tokenmeta.config import TokenMetaSettings
from tokenmeta.core.exceptions import (
    AllEndpointsFailedError,
    EncodeError,
    MetadataFetchError,
    MetadataParseError,
    TokenMetaError,
)
from tokenmeta.core.models import ResolutionResult, TraitSummary
from tokenmeta.core.types import FailureReason, UriScheme
from tokenmeta.metadata.resolver import MetadataResolver
from tokenmeta.metadata.traits import TraitExtractor

__version__ = "0.1.0"
__all__ = [
    # Client
    "TokenMetaClient",
    "resolve_token",
    "TokenMetaSettings",
    # Components
    "MetadataResolver",
    "RpcFailoverClient",
    "TraitExtractor",
    # Types
    "FailureReason",
    "UriScheme",
    # Results
    "FailoverResult",
    "ResolutionResult",
    "TraitSummary",
    # Errors
    "AllEndpointsFailedError",
    "EncodeError",
    "MetadataFetchError",
    "MetadataParseError",
    "TokenMetaError",
    # Version
    "__version__",
]
