"""Custom exception hierarchy for tokenmeta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tokenmeta.core.models import EndpointFailure


class TokenMetaError(Exception):
    """Base exception for all tokenmeta errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TokenMetaError):
    """Input validation failed."""

    pass


class EncodeError(TokenMetaError):
    """A call argument cannot be ABI-encoded."""

    pass


class ChainError(TokenMetaError):
    """Failed to read from the chain."""

    pass


class AllEndpointsFailedError(ChainError):
    """Every configured RPC endpoint failed the call."""

    def __init__(
        self,
        message: str,
        failures: list[EndpointFailure] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.failures = list(failures or [])

    @property
    def last_failure(self) -> EndpointFailure | None:
        """The most recent failure observed, if any endpoint was tried."""
        return self.failures[-1] if self.failures else None


class MetadataError(TokenMetaError):
    """Failed to obtain the metadata document."""

    pass


class MetadataFetchError(MetadataError):
    """The metadata document could not be retrieved."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class MetadataParseError(MetadataError):
    """The metadata body is not a JSON object."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
