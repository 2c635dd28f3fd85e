"""Base error class for Railway-Oriented Programming.

DomainError is the base class for every error the relay reports. Errors
flow through the system as data inside ``Failure`` results; they are never
raised.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from botrelay.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message, safe to show to callers.
        details: Optional context for logs. Never returned to callers.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
