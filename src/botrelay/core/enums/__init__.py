"""Core enums package.

Usage:
    from botrelay.core.enums import ErrorCode, Environment, AuthScheme
"""

from botrelay.core.enums.auth_scheme import AuthScheme
from botrelay.core.enums.environment import Environment
from botrelay.core.enums.error_code import ErrorCode

__all__ = ["AuthScheme", "Environment", "ErrorCode"]
