"""Generic error classes shared by every layer.

Error Types:
- ValidationError: Caller omitted or blanked a required field
- NotFoundError: Referenced bot or category is absent upstream
- ConfigurationError: Required configuration missing at runtime

Usage:
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message="All fields are required.",
            fields=("botName",),
        )
    )
"""

from dataclasses import dataclass

from botrelay.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        fields: Names (as the caller spelled them) of the missing fields.
    """

    fields: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found in the current upstream snapshot.

    Attributes:
        resource_type: "bot" or "category".
        resource_id: Nickname or id that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigurationError(DomainError):
    """Required configuration is absent.

    Attributes:
        setting: Name of the missing setting (e.g. "api_token").
    """

    setting: str
