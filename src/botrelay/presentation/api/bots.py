"""Bot endpoints.

Endpoints:
    GET  /api/public-bots   - List the public bot pool
    POST /api/register-bot  - Register a bot for an alt account
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from botrelay.application.commands.handlers.register_bot_handler import (
    RegisterBotHandler,
)
from botrelay.application.commands.registration_commands import RegisterBot
from botrelay.application.queries.bot_queries import ListPublicBots
from botrelay.application.queries.handlers.list_public_bots_handler import (
    ListPublicBotsHandler,
)
from botrelay.core.container import (
    get_list_public_bots_handler,
    get_register_bot_handler,
)
from botrelay.core.enums import ErrorCode
from botrelay.core.errors import ValidationError
from botrelay.core.result import Failure, Success
from botrelay.presentation.api.errors import ErrorResponseBuilder
from botrelay.schemas.relay_schemas import (
    ErrorResponse,
    PublicBotListResponse,
    RegisterBotRequest,
    RegisterBotResponse,
    RegisteredBot,
)

router = APIRouter(tags=["Bots"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@router.get(
    "/public-bots",
    response_model=PublicBotListResponse,
    responses={
        500: {"description": "API token not configured", "model": ErrorResponse},
        503: {"description": "Upstream unavailable", "model": ErrorResponse},
    },
    summary="List public bots",
)
async def list_public_bots(
    handler: ListPublicBotsHandler = Depends(get_list_public_bots_handler),
) -> PublicBotListResponse | JSONResponse:
    """List bots of the public pool.

    GET /api/public-bots -> 200 OK
    """
    result = await handler.handle(ListPublicBots())

    match result:
        case Success(value=listing):
            return PublicBotListResponse(bots=[bot.to_dict() for bot in listing.bots])
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                upstream_message="Failed to fetch public bots.",
            )


@router.post(
    "/register-bot",
    response_model=RegisterBotResponse,
    responses={
        400: {"description": "Missing fields", "model": ErrorResponse},
        404: {"description": "Bot not found", "model": ErrorResponse},
        500: {"description": "API token not configured", "model": ErrorResponse},
        503: {"description": "Upstream unavailable", "model": ErrorResponse},
    },
    summary="Register bot",
    description="Register an upstream bot for an alt account under a category. "
    "Accepts a JSON or form-encoded body.",
)
async def register_bot(
    request: Request,
    handler: RegisterBotHandler = Depends(get_register_bot_handler),
) -> RegisterBotResponse | JSONResponse:
    """Register a bot.

    POST /api/register-bot -> 200 OK
    """
    body = await _read_register_request(request)
    if isinstance(body, Failure):
        return ErrorResponseBuilder.from_domain_error(body.error)

    data = body.value
    result = await handler.handle(
        RegisterBot(
            auth_code=data.auth_code,
            alt_account=data.alt_account,
            bot_name=data.bot_name,
            category_id=data.category_id,
        )
    )

    match result:
        case Success(value=registration):
            return RegisterBotResponse(
                bot=RegisteredBot(
                    nickname=registration.nickname,
                    email=registration.email,
                    alt_account=registration.alt_account,
                    category_id=registration.category_id,
                )
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                upstream_message="Failed to register bot.",
            )


async def _read_register_request(
    request: Request,
) -> Success[RegisterBotRequest] | Failure[ValidationError]:
    """Decode the register body from JSON or form data.

    An empty body decodes to an empty request so the handler reports the
    missing fields.
    """
    content_type = request.headers.get("content-type", "").lower()
    payload: Any

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        payload = {key: value for key, value in form.items() if isinstance(value, str)}
    else:
        raw = await request.body()
        if not raw.strip():
            payload = {}
        else:
            try:
                payload = await request.json()
            except ValueError:
                return _invalid_body("Request body must be JSON or form encoded.")

    if not isinstance(payload, dict):
        return _invalid_body("Request body must be an object.")

    try:
        return Success(value=RegisterBotRequest.model_validate(payload))
    except PydanticValidationError as e:
        fields = tuple(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="Fields must be strings.",
                fields=fields,
            )
        )


def _invalid_body(message: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=message,
        )
    )

