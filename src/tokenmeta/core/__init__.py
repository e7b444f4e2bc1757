"""Core types, models, and utilities."""

from .exceptions import (
    AllEndpointsFailedError,
    ChainError,
    EncodeError,
    MetadataError,
    MetadataFetchError,
    MetadataParseError,
    TokenMetaError,
    ValidationError,
)
from .models import (
    Attribute,
    CallRequest,
    EndpointFailure,
    MetadataDocument,
    ResolutionResult,
    RpcConfig,
    TraitSummary,
)
from .normalization import normalize_label, parse_int_value
from .types import FailureReason, UriScheme

__all__ = [
    # Types
    "FailureReason",
    "UriScheme",
    # Models
    "Attribute",
    "CallRequest",
    "EndpointFailure",
    "MetadataDocument",
    "ResolutionResult",
    "RpcConfig",
    "TraitSummary",
    # Normalization
    "normalize_label",
    "parse_int_value",
    # Exceptions
    "AllEndpointsFailedError",
    "ChainError",
    "EncodeError",
    "MetadataError",
    "MetadataFetchError",
    "MetadataParseError",
    "TokenMetaError",
    "ValidationError",
]
