"""Error response builder.

Converts DomainError values into the relay's JSON error body:

    {"error": "<message>", "kind": "<code>", "traceId": "..."}

Status mapping:
    ValidationError     -> 400
    NotFoundError       -> 404
    ConfigurationError  -> 500
    UpstreamError       -> 503 (upstream status kept in ``upstreamStatus``)
    anything else       -> 500

Upstream failures are reported with an operation-specific message chosen
by the router; the upstream's own message and body only reach the logs.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from botrelay.core.container import get_logger
from botrelay.core.errors import (
    ConfigurationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from botrelay.domain.errors import UpstreamError
from botrelay.presentation.api.middleware.trace_middleware import get_trace_id
from botrelay.schemas.relay_schemas import ErrorResponse


class ErrorResponseBuilder:
    """Build JSON error responses from domain errors.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error,
        ...     upstream_message="Failed to fetch public bots.",
        ... )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        *,
        upstream_message: str | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to a JSON response.

        Args:
            error: Error returned by a handler.
            upstream_message: Caller-facing message for upstream failures.

        Returns:
            JSONResponse with ErrorResponse content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error)
        trace_id = get_trace_id()

        body = ErrorResponse(
            error=error.message,
            kind=error.code.value,
            trace_id=trace_id,
        )
        if isinstance(error, ValidationError) and error.fields:
            body.fields = list(error.fields)
        if isinstance(error, UpstreamError):
            body.error = upstream_message or error.message
            body.upstream_status = error.status_code

        ErrorResponseBuilder._log(error, status_code)

        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(by_alias=True, exclude_none=True),
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map a domain error to an HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(not_found_error)
            404
        """
        if isinstance(error, ValidationError):
            return status.HTTP_400_BAD_REQUEST
        if isinstance(error, NotFoundError):
            return status.HTTP_404_NOT_FOUND
        if isinstance(error, UpstreamError):
            return status.HTTP_503_SERVICE_UNAVAILABLE
        if isinstance(error, ConfigurationError):
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def _log(error: DomainError, status_code: int) -> None:
        context: dict[str, object] = {
            "kind": error.code.value,
            "status_code": status_code,
            "detail": error.message,
        }
        if isinstance(error, UpstreamError):
            context["upstream_status"] = error.status_code
            response_body = getattr(error, "response_body", None)
            if response_body:
                context["upstream_body"] = response_body
        if error.details:
            context.update(error.details)

        logger = get_logger()
        if status_code >= 500:
            logger.error("request_failed", **context)
        else:
            logger.info("request_rejected", **context)
