"""Core errors package.

Usage:
    from botrelay.core.errors import DomainError, ValidationError, NotFoundError
"""

from botrelay.core.errors.common_errors import (
    ConfigurationError,
    NotFoundError,
    ValidationError,
)
from botrelay.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
]
