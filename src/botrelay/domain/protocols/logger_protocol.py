"""LoggerProtocol definition for structured logging.

Log calls are structured: a snake_case event name plus key-value context.

Security:
    - NEVER log the upstream API token or caller auth codes

Usage:
    from botrelay.core.container import get_logger

    logger = get_logger()
    logger.info("bot_registered", alt_account=alt_account, bot_name=bot_name)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("upstream_rate_limited", retry_after=10)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception; type and message are added to context.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger with ``context`` attached to every entry."""
        ...
