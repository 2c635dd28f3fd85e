"""Machine-readable error codes.

Error codes follow ENTITY_REASON naming and are returned to relay callers
as the ``kind`` field of every error body, so their values are part of the
public contract and must stay stable.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    BOT_NOT_FOUND = "bot_not_found"
    CATEGORY_NOT_FOUND = "category_not_found"

    # Configuration errors
    CONFIGURATION_MISSING = "configuration_missing"

    # Upstream errors
    UPSTREAM_RATE_LIMITED = "upstream_rate_limited"
    UPSTREAM_RETRY_EXHAUSTED = "upstream_retry_exhausted"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_AUTHENTICATION_FAILED = "upstream_authentication_failed"
    UPSTREAM_INVALID_RESPONSE = "upstream_invalid_response"

    # Unhandled
    INTERNAL_ERROR = "internal_error"
