"""Domain errors package.

Usage:
    from botrelay.domain.errors import UpstreamError, RetryBudgetExhaustedError
"""

from botrelay.domain.errors.upstream_error import (
    RetryBudgetExhaustedError,
    UpstreamAuthenticationError,
    UpstreamError,
    UpstreamInvalidResponseError,
    UpstreamThrottledError,
    UpstreamUnavailableError,
)

__all__ = [
    "UpstreamError",
    "UpstreamThrottledError",
    "RetryBudgetExhaustedError",
    "UpstreamUnavailableError",
    "UpstreamAuthenticationError",
    "UpstreamInvalidResponseError",
]
