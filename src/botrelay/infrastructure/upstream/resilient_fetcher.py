"""Resilient fetcher for upstream HTTP GETs.

The upstream rate-limits aggressively. Instead of surfacing every 429 to
the browser, the fetcher waits for the interval the upstream advertises in
``Retry-After`` and tries again, up to a fixed number of attempts:

- 2xx: returned as ``Success(response)``
- 429: wait ``Retry-After`` seconds (default when absent or unparseable,
  capped at ``retry_after_max``), then retry; after ``max_retries``
  attempts ``RetryBudgetExhaustedError``
- 401/403: ``UpstreamAuthenticationError``, no retry
- any other status: ``UpstreamUnavailableError`` with the status, no retry
- timeout / connection failure: ``UpstreamUnavailableError``, no retry

The wait is an ``await`` on an injectable sleep (``asyncio.sleep`` by
default), so a throttled request never blocks other requests.

Worst-case latency is ``(max_retries - 1) * retry_after_max`` plus request
time.
"""

import asyncio
import math
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx
import structlog

from botrelay.core.constants import (
    MAX_RETRIES_DEFAULT,
    RESPONSE_BODY_MAX_LENGTH,
    RETRY_AFTER_DEFAULT_SECONDS,
    RETRY_AFTER_MAX_SECONDS,
    UPSTREAM_PROVIDER_NAME,
    UPSTREAM_TIMEOUT_DEFAULT,
)
from botrelay.core.enums import ErrorCode
from botrelay.core.result import Failure, Result, Success
from botrelay.domain.errors import (
    RetryBudgetExhaustedError,
    UpstreamAuthenticationError,
    UpstreamError,
    UpstreamThrottledError,
    UpstreamUnavailableError,
)

SleepFunc = Callable[[float], Awaitable[None]]


class ResilientFetcher:
    """GET with bounded retry on rate-limit responses.

    Headers are forwarded verbatim, so the fetcher is agnostic of the
    upstream authorization scheme.

    Attributes:
        _provider_name: Upstream identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _max_retries: Default total attempt budget.
        _retry_after_default: Wait used when Retry-After is unusable.
        _retry_after_max: Ceiling applied to every wait.
        _sleep: Suspension primitive awaited between attempts.
        _logger: Structured logger with upstream context.

    Example:
        >>> fetcher = ResilientFetcher(max_retries=3)
        >>> result = await fetcher.fetch(
        ...     "https://api.fnlb.net/bots",
        ...     headers={"Authorization": token},
        ...     operation="list_bots",
        ... )
    """

    def __init__(
        self,
        *,
        provider_name: str = UPSTREAM_PROVIDER_NAME,
        timeout: float = UPSTREAM_TIMEOUT_DEFAULT,
        max_retries: int = MAX_RETRIES_DEFAULT,
        retry_after_default: float = RETRY_AFTER_DEFAULT_SECONDS,
        retry_after_max: float = RETRY_AFTER_MAX_SECONDS,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize the fetcher.

        Args:
            provider_name: Upstream identifier (e.g., "fnlb").
            timeout: HTTP request timeout in seconds.
            max_retries: Total attempts allowed while rate limited (>= 1).
            retry_after_default: Seconds to wait when Retry-After is missing.
            retry_after_max: Longest wait honored for a single 429.
            sleep: Awaitable sleep, replaced in tests.

        Raises:
            ValueError: If max_retries < 1, retry_after_default < 0 or
                retry_after_max < retry_after_default.
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if retry_after_default < 0:
            raise ValueError("retry_after_default must be >= 0")
        if retry_after_max < retry_after_default:
            raise ValueError("retry_after_max must be >= retry_after_default")
        self._provider_name = provider_name
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_after_default = retry_after_default
        self._retry_after_max = retry_after_max
        self._sleep = sleep
        self._logger = structlog.get_logger(f"{provider_name}_api")

    @property
    def max_retries(self) -> int:
        """Default total attempt budget."""
        return self._max_retries

    async def fetch(
        self,
        url: str,
        *,
        headers: dict[str, str],
        max_retries: int | None = None,
        operation: str = "fetch",
    ) -> Result[httpx.Response, UpstreamError]:
        """GET ``url``, retrying while the upstream answers 429.

        Args:
            url: Absolute URL to fetch.
            headers: HTTP headers, including upstream authorization.
            max_retries: Attempt budget for this call (defaults to the
                fetcher's budget).
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): First 2xx response.
            Failure(RetryBudgetExhaustedError): Every attempt was a 429.
            Failure(UpstreamUnavailableError): Other failure, first attempt.

        Raises:
            ValueError: If max_retries < 1.
        """
        budget = self._max_retries if max_retries is None else max_retries
        if budget < 1:
            raise ValueError("max_retries must be at least 1")

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            for attempt in range(1, budget + 1):
                sent = await self._send(client, url, headers, operation)
                if isinstance(sent, Failure):
                    return sent

                response = sent.value
                throttled = self._check_throttled(response)
                if throttled is None:
                    error_result = self._check_error_response(response, operation)
                    if error_result is not None:
                        return error_result
                    self._logger.debug(
                        f"{self._provider_name}_api_succeeded",
                        operation=operation,
                        attempt=attempt,
                    )
                    return Success(value=response)

                wait = throttled.retry_after or 0.0
                self._logger.warning(
                    f"{self._provider_name}_api_rate_limited",
                    operation=operation,
                    attempt=attempt,
                    max_retries=budget,
                    retry_after=wait,
                )
                if attempt < budget:
                    await self._sleep(wait)

        self._logger.error(
            f"{self._provider_name}_api_retry_exhausted",
            operation=operation,
            attempts=budget,
        )
        return Failure(
            error=RetryBudgetExhaustedError(
                code=ErrorCode.UPSTREAM_RETRY_EXHAUSTED,
                message="Rate limit exceeded after multiple retries.",
                provider_name=self._provider_name,
                status_code=429,
                attempts=budget,
            )
        )

    def parse_retry_after(self, value: str | None) -> float:
        """Interpret a Retry-After header value as seconds to wait.

        Accepts delta-seconds ("10", "1.5") and HTTP-dates. Missing, negative
        or unparseable values fall back to the configured default. The result
        is capped at ``retry_after_max``.

        Args:
            value: Raw header value.

        Returns:
            Seconds to wait, between 0 and ``retry_after_max``.
        """
        if value is None or not value.strip():
            return self._retry_after_default

        text = value.strip()
        try:
            seconds = float(text)
        except ValueError:
            try:
                retry_at = parsedate_to_datetime(text)
            except (TypeError, ValueError, IndexError):
                return self._retry_after_default
            if retry_at.tzinfo is None:
                retry_at = retry_at.replace(tzinfo=UTC)
            seconds = max((retry_at - datetime.now(UTC)).total_seconds(), 0.0)
            return min(seconds, self._retry_after_max)

        if not math.isfinite(seconds) or seconds < 0:
            return self._retry_after_default
        return min(seconds, self._retry_after_max)

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        headers: dict[str, str],
        operation: str,
    ) -> Result[httpx.Response, UpstreamError]:
        """Execute one GET with network error handling.

        Returns:
            Success(httpx.Response): Raw response, whatever its status.
            Failure(UpstreamUnavailableError): On timeout or connection error.
        """
        try:
            response = await client.get(url, headers=headers)
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._provider_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UpstreamUnavailableError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"{self._provider_name.upper()} API request timed out",
                    provider_name=self._provider_name,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._provider_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UpstreamUnavailableError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"Failed to connect to {self._provider_name.upper()} API",
                    provider_name=self._provider_name,
                    details={"reason": str(e)},
                )
            )

    def _check_throttled(self, response: httpx.Response) -> UpstreamThrottledError | None:
        """Return a throttled error for 429 responses, None otherwise."""
        if response.status_code != 429:
            return None
        return UpstreamThrottledError(
            code=ErrorCode.UPSTREAM_RATE_LIMITED,
            message=f"{self._provider_name.upper()} API rate limit exceeded",
            provider_name=self._provider_name,
            status_code=429,
            retry_after=self.parse_retry_after(response.headers.get("Retry-After")),
        )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[UpstreamError] | None:
        """Check a non-429 response for errors.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(UpstreamError) if the status is not 2xx, None otherwise.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status in (401, 403):
            self._logger.warning(
                f"{self._provider_name}_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=UpstreamAuthenticationError(
                    code=ErrorCode.UPSTREAM_AUTHENTICATION_FAILED,
                    message=f"{self._provider_name.upper()} API rejected the configured credential",
                    provider_name=self._provider_name,
                    status_code=status,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.warning(
            f"{self._provider_name}_api_error_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=UpstreamUnavailableError(
                code=ErrorCode.UPSTREAM_UNAVAILABLE,
                message=f"{self._provider_name.upper()} API returned status {status}",
                provider_name=self._provider_name,
                status_code=status,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )
