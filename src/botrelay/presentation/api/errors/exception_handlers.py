"""Global exception handlers for the FastAPI application.

Every error leaving the relay uses the same ``{"error", "kind"}`` body,
including framework errors that never reach a handler.

Handlers:
    http_exception_handler: HTTPException (unknown route, wrong method)
    validation_exception_handler: RequestValidationError -> 400
    generic_exception_handler: Anything unhandled -> 500, details logged only

Exports:
    register_exception_handlers: Register all exception handlers with the app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from botrelay.core.container import get_logger
from botrelay.core.enums import ErrorCode
from botrelay.schemas.relay_schemas import ErrorResponse

# HTTP status -> kind slug for framework-raised errors
_HTTP_STATUS_KIND: dict[int, str] = {
    400: "bad_request",
    404: "route_not_found",
    405: "method_not_allowed",
    415: "unsupported_media_type",
}


def _error_body(
    request: Request,
    *,
    message: str,
    kind: str,
    fields: list[str] | None = None,
) -> dict[str, object]:
    body = ErrorResponse(
        error=message,
        kind=kind,
        fields=fields,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return body.model_dump(by_alias=True, exclude_none=True)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to the relay error body."""
    assert isinstance(exc, StarletteHTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(
            request,
            message=detail,
            kind=_HTTP_STATUS_KIND.get(exc.status_code, "http_error"),
        ),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 validation error.

    Only the offending field names are returned; pydantic's messages go to
    the log.
    """
    assert isinstance(exc, RequestValidationError)

    fields: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", []) if part not in ("body", "query")]
        fields.append(".".join(loc) if loc else "unknown")

    get_logger().info(
        "request_validation_failed",
        path=request.url.path,
        errors=[error.get("msg") for error in exc.errors()],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            request,
            message="Request validation failed.",
            kind=ErrorCode.VALIDATION_FAILED.value,
            fields=fields or None,
        ),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    The exception is logged with the trace id; the caller only gets a
    generic message.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        path=request.url.path,
        method=request.method,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            request,
            message="Something went wrong on the server.",
            kind=ErrorCode.INTERNAL_ERROR.value,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
