"""Input validation helpers.

Validation functions return Result types, like every other fallible
operation in the relay.

Usage:
    result = validate_required(authCode=cmd.auth_code, botName=cmd.bot_name)
    if isinstance(result, Failure):
        return result
"""

from typing import Any

from botrelay.core.enums import ErrorCode
from botrelay.core.errors import ValidationError
from botrelay.core.result import Failure, Result, Success


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_required(
    message: str = "All fields are required.", /, **values: Any
) -> Result[None, ValidationError]:
    """Validate that every keyword value is present and non-blank.

    Keyword names are reported back to the caller, so pass them in the
    caller's spelling (``botName``, not ``bot_name``).

    Args:
        message: Human-readable message used on failure.
        **values: Field name -> value.

    Returns:
        Success(None) if all fields are present.
        Failure(ValidationError) listing every missing field, in order.
    """
    missing = tuple(name for name, value in values.items() if is_blank(value))
    if missing:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=message,
                fields=missing,
            )
        )
    return Success(value=None)
