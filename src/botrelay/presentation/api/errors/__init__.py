"""Error response building and global exception handlers.

Exports:
    ErrorResponseBuilder: DomainError -> JSON error response
    register_exception_handlers: Install global handlers on the app
"""

from botrelay.presentation.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from botrelay.presentation.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["ErrorResponseBuilder", "register_exception_handlers"]
