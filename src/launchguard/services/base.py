"""Base JSON-RPC client with circuit breaker and retry logic.

This module provides:
- CircuitState enum for circuit breaker states
- CircuitBreaker dataclass for tracking consecutive failures
- BaseRPCClient for resilient JSON-RPC calls over httpx, retried with tenacity
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from launchguard.core.exceptions import CircuitBreakerOpenError, ExternalServiceError

log = structlog.get_logger(__name__)


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation, requests allowed
    OPEN = "open"  # Circuit tripped, requests blocked
    HALF_OPEN = "half_open"  # Testing if service recovered


@dataclass
class CircuitBreaker:
    """Opens after `failure_threshold` consecutive failures.

    Once `cooldown_seconds` have passed since the last failure, one test
    request is let through (half-open); a failure there reopens at once.
    """

    failure_threshold: int = 5
    cooldown_seconds: int = 30
    failure_count: int = field(default=0, init=False)
    last_failure_time: datetime | None = field(default=None, init=False)
    state: CircuitState = field(default=CircuitState.CLOSED, init=False)

    def record_success(self) -> None:
        self.failure_count = 0
        self.state = CircuitState.CLOSED

    def record_failure(self) -> None:
        self.failure_count += 1
        self.last_failure_time = datetime.now(UTC)

        if self.state == CircuitState.HALF_OPEN or self.failure_count >= self.failure_threshold:
            if self.state != CircuitState.OPEN:
                log.warning(
                    "circuit_breaker_opened",
                    failure_count=self.failure_count,
                    threshold=self.failure_threshold,
                )
            self.state = CircuitState.OPEN

    def can_execute(self) -> bool:
        """Whether a request may go out now (may move OPEN to HALF_OPEN)."""
        if self.state != CircuitState.OPEN:
            return True

        if self.last_failure_time is None:
            return False

        elapsed = datetime.now(UTC) - self.last_failure_time
        if elapsed > timedelta(seconds=self.cooldown_seconds):
            self.state = CircuitState.HALF_OPEN
            log.info("circuit_breaker_half_open", cooldown_elapsed=elapsed.total_seconds())
            return True
        return False

    def raise_if_open(self) -> None:
        """Raise CircuitBreakerOpenError if requests are currently blocked."""
        if not self.can_execute():
            raise CircuitBreakerOpenError(
                f"Circuit breaker is open. Next retry in "
                f"{self._time_until_half_open():.1f} seconds."
            )

    def _time_until_half_open(self) -> float:
        if self.last_failure_time is None:
            return 0.0
        elapsed = datetime.now(UTC) - self.last_failure_time
        return max(0.0, self.cooldown_seconds - elapsed.total_seconds())


class _RetryableError(Exception):
    """Transient failure (timeout, connection error, 429 or 5xx)."""


class BaseRPCClient:
    """JSON-RPC client with lazy httpx client, retries and a circuit breaker.

    Example:
        client = BaseRPCClient(base_url="https://api.mainnet-beta.solana.com")
        result = await client.call("getSlot", [])
        await client.close()
    """

    service_name = "JSON-RPC"

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        max_retries: int = 3,
        circuit_breaker_threshold: int = 5,
        circuit_breaker_cooldown: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize BaseRPCClient.

        Args:
            base_url: RPC endpoint URL.
            timeout: Request timeout in seconds.
            max_retries: Attempts per call before giving up.
            circuit_breaker_threshold: Failures before circuit opens.
            circuit_breaker_cooldown: Seconds before half-open.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_id = 0
        self._circuit_breaker = CircuitBreaker(
            failure_threshold=circuit_breaker_threshold,
            cooldown_seconds=circuit_breaker_cooldown,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def call(self, method: str, params: list[Any]) -> Any:
        """Invoke a JSON-RPC method and return its `result`.

        Raises:
            CircuitBreakerOpenError: If the circuit is open.
            ExternalServiceError: On client errors, RPC errors, or once
                retries are exhausted.
        """
        self._request_id += 1
        payload = {"jsonrpc": "2.0", "id": self._request_id, "method": method, "params": params}

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
                retry=retry_if_exception_type(_RetryableError),
                reraise=True,
            ):
                with attempt:
                    self._circuit_breaker.raise_if_open()
                    body = await self._post(method, payload)
        except _RetryableError as e:
            log.error("rpc_max_retries_exceeded", method=method, max_retries=self.max_retries)
            raise ExternalServiceError(
                service=self.service_name,
                message=f"Max retries ({self.max_retries}) exceeded: {e}",
            ) from e

        if "error" in body:
            error = body["error"]
            if isinstance(error, dict):
                error = error.get("message", error)
            raise ExternalServiceError(
                service=self.service_name,
                message=f"{method} failed: {error}",
            )
        return body.get("result")

    async def _post(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        client = await self._get_client()
        try:
            response = await client.post("", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            # 4xx other than 429 will not succeed on retry
            if 400 <= status_code < 500 and status_code != 429:
                log.warning("rpc_client_error", method=method, status_code=status_code)
                raise ExternalServiceError(
                    service=self.service_name,
                    message=str(e),
                    status_code=status_code,
                ) from e
            self._circuit_breaker.record_failure()
            log.warning("rpc_server_error", method=method, status_code=status_code)
            raise _RetryableError(str(e)) from e
        except (httpx.TimeoutException, httpx.RequestError) as e:
            self._circuit_breaker.record_failure()
            log.warning("rpc_connection_error", method=method, error=str(e))
            raise _RetryableError(str(e)) from e

        self._circuit_breaker.record_success()
        try:
            data = response.json()
        except ValueError as e:
            log.warning("rpc_invalid_response", method=method, error=str(e))
            raise ExternalServiceError(
                service=self.service_name,
                message=f"{method} returned a non-JSON response",
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise ExternalServiceError(
                service=self.service_name,
                message=f"{method} returned a non-object JSON body",
                status_code=response.status_code,
            )
        return data
