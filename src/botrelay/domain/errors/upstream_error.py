"""Upstream error types.

These errors describe every way a call to the FNLB API can fail. The
fetcher and the upstream client return them inside ``Failure`` results;
the presentation layer maps all of them to a service-unavailable response.

Usage:
    from botrelay.domain.errors import UpstreamError, UpstreamUnavailableError

    async def list_bots(self) -> Result[list[Bot], UpstreamError]:
        ...
"""

from dataclasses import dataclass

from botrelay.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamError(DomainError):
    """Base upstream API error.

    Attributes:
        provider_name: Upstream identifier (always "fnlb" today).
        status_code: HTTP status returned by the upstream, when there was one.
    """

    provider_name: str
    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamThrottledError(UpstreamError):
    """Upstream answered 429 Too Many Requests.

    Recovered locally by the fetcher's retry loop. Callers only ever see
    RetryBudgetExhaustedError.

    Attributes:
        retry_after: Seconds the upstream asked us to wait.
    """

    retry_after: float | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RetryBudgetExhaustedError(UpstreamError):
    """Every attempt within the retry budget was rate limited.

    Attributes:
        attempts: Number of requests made before giving up.
    """

    attempts: int


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamUnavailableError(UpstreamError):
    """Upstream returned a non-2xx status or could not be reached.

    Raised when:
    - Upstream returns a 4xx/5xx other than 429
    - Connection timeout occurs
    - DNS resolution or TLS handshake fails

    Attributes:
        response_body: Truncated upstream body, kept for logs only.
    """

    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamAuthenticationError(UpstreamUnavailableError):
    """Upstream rejected the configured credential (401/403).

    Usually means the key is wrong or the auth scheme does not match what
    the upstream expects.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamInvalidResponseError(UpstreamError):
    """Upstream returned a body the relay cannot use.

    Raised when the JSON is malformed or a listing is not a JSON array of
    objects.

    Attributes:
        response_body: Truncated upstream body, kept for logs only.
    """

    response_body: str | None = None
