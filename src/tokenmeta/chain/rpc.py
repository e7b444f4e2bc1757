"""JSON-RPC client with ordered endpoint failover."""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from tokenmeta.core.exceptions import AllEndpointsFailedError
from tokenmeta.core.models import CallRequest, EndpointFailure, RpcConfig
from tokenmeta.core.types import FailureReason

logger = logging.getLogger(__name__)

_request_ids = itertools.count(1)


@dataclass
class FailoverResult:
    """Outcome of one ordered pass over the configured endpoints."""

    value: Any = None
    endpoint: str | None = None
    failures: list[EndpointFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether an endpoint answered."""
        return self.endpoint is not None

    @property
    def last_failure(self) -> EndpointFailure | None:
        """The most recent failure, if any."""
        return self.failures[-1] if self.failures else None


class _EndpointAttemptError(Exception):
    """Internal signal carrying the classified failure of one attempt."""

    def __init__(self, failure: EndpointFailure) -> None:
        super().__init__(str(failure))
        self.failure = failure


class RpcFailoverClient:
    """
    Read-only JSON-RPC client over an ordered list of equivalent endpoints.

    Features:
    - Endpoints tried strictly in configured order, each at most once per call
    - First structurally valid, error-free result wins
    - Per-endpoint attempt timeout
    - No health memory between calls
    """

    def __init__(
        self,
        config: RpcConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def endpoints(self) -> tuple[str, ...]:
        """Endpoints in failover order."""
        return self.config.endpoints

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                headers={
                    "User-Agent": "tokenmeta/0.1",
                    "Content-Type": "application/json",
                },
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _attempt(
        self,
        endpoint: str,
        payload: dict[str, Any],
    ) -> Any:
        """Send one request to one endpoint and return its result."""
        client = self._get_client()

        try:
            async with asyncio.timeout(self.config.timeout):
                response = await client.post(
                    endpoint,
                    json=payload,
                    timeout=self.config.timeout,
                )
        except (TimeoutError, httpx.TimeoutException) as e:
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.TIMEOUT,
                    message=f"No response within {self.config.timeout}s",
                )
            ) from e
        except httpx.HTTPError as e:
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.TRANSPORT,
                    message=str(e) or type(e).__name__,
                )
            ) from e

        if not response.is_success:
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.HTTP_STATUS,
                    message=f"HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            )

        try:
            data = response.json()
        except ValueError as e:
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.INVALID_RESPONSE,
                    message="Response body is not JSON",
                    status_code=response.status_code,
                )
            ) from e

        if not isinstance(data, dict):
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.INVALID_RESPONSE,
                    message="Response is not a JSON-RPC object",
                    status_code=response.status_code,
                )
            )

        if data.get("error") is not None:
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else None
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.RPC_ERROR,
                    message=message or str(error),
                    status_code=response.status_code,
                )
            )

        if "result" not in data:
            raise _EndpointAttemptError(
                EndpointFailure(
                    endpoint=endpoint,
                    reason=FailureReason.INVALID_RESPONSE,
                    message="Response has neither result nor error",
                    status_code=response.status_code,
                )
            )

        return data["result"]

    async def try_endpoints(self, method: str, params: list[Any]) -> FailoverResult:
        """Run the call against each endpoint in order until one succeeds."""
        result = FailoverResult()
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": next(_request_ids),
        }

        for endpoint in self.config.endpoints:
            try:
                value = await self._attempt(endpoint, payload)
            except _EndpointAttemptError as e:
                logger.warning(f"RPC {method} failed on {e.failure}")
                result.failures.append(e.failure)
                continue

            result.value = value
            result.endpoint = endpoint
            if result.failures:
                logger.info(
                    f"RPC {method} answered by {endpoint} after "
                    f"{len(result.failures)} failed endpoint(s)"
                )
            break

        return result

    async def call(self, method: str, params: list[Any]) -> Any:
        """
        Make a JSON-RPC call with endpoint failover.

        Args:
            method: RPC method name (e.g., "eth_call")
            params: RPC parameters

        Returns:
            Result field from the first endpoint that answered

        Raises:
            AllEndpointsFailedError: If every endpoint failed
        """
        result = await self.try_endpoints(method, params)
        if result.success:
            return result.value

        last = result.last_failure
        message = f"All {len(self.config.endpoints)} RPC endpoints failed for {method}"
        if last is not None:
            message += f" (last: {last})"
        raise AllEndpointsFailedError(
            message,
            failures=result.failures,
            details={"method": method},
        )

    async def eth_call(self, request: CallRequest) -> Any:
        """Execute a read-only contract call."""
        return await self.call("eth_call", request.to_params())

    async def __aenter__(self) -> RpcFailoverClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
