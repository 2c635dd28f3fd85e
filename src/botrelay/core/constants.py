"""Centralized constants for internal implementation details.

Environment-specific values belong in ``botrelay.core.config``; the values
here are fixed properties of the upstream API and the relay itself.
"""

# =============================================================================
# Upstream
# =============================================================================

UPSTREAM_BASE_URL_DEFAULT: str = "https://api.fnlb.net"
"""FNLB API base URL."""

UPSTREAM_PROVIDER_NAME: str = "fnlb"
"""Upstream identifier used in logs and error messages."""

BOTS_PATH: str = "/bots"
"""Upstream bot listing endpoint."""

CATEGORIES_PATH: str = "/categories"
"""Upstream category listing endpoint."""


# =============================================================================
# Timeouts and Retries
# =============================================================================

UPSTREAM_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for upstream API calls in seconds."""

MAX_RETRIES_DEFAULT: int = 3
"""Total attempts allowed when the upstream keeps answering 429."""

RETRY_AFTER_DEFAULT_SECONDS: float = 10.0
"""Wait used when a 429 carries no usable Retry-After header."""

RETRY_AFTER_MAX_SECONDS: float = 60.0
"""Longest single wait honored, whatever Retry-After asks for."""


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

PUBLIC_BOT_PREFIX_DEFAULT: str = "ogsboti"
"""Nickname prefix (case-insensitive) marking bots of the public pool."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of an upstream body kept in error details."""
