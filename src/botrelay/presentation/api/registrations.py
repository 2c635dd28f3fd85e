"""Registration endpoints.

Endpoints:
    GET /api/registrations?altAccount=...  - Bots registered by an alt account

Served from the in-memory store only; the upstream is not contacted.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from botrelay.application.queries.handlers.list_account_registrations_handler import (
    ListAccountRegistrationsHandler,
)
from botrelay.application.queries.registration_queries import (
    ListAccountRegistrations,
)
from botrelay.core.container import get_list_account_registrations_handler
from botrelay.core.result import Failure, Success
from botrelay.presentation.api.errors import ErrorResponseBuilder
from botrelay.schemas.relay_schemas import (
    ErrorResponse,
    RegistrationItem,
    RegistrationListResponse,
)

router = APIRouter(tags=["Registrations"])


@router.get(
    "/registrations",
    response_model=RegistrationListResponse,
    responses={400: {"description": "altAccount missing", "model": ErrorResponse}},
    summary="List registrations of an alt account",
)
async def list_registrations(
    alt_account: Annotated[
        str | None,
        Query(alias="altAccount", description="Alt account id"),
    ] = None,
    handler: ListAccountRegistrationsHandler = Depends(
        get_list_account_registrations_handler
    ),
) -> RegistrationListResponse | JSONResponse:
    """List registrations recorded for an alt account.

    GET /api/registrations?altAccount=... -> 200 OK
    """
    result = await handler.handle(ListAccountRegistrations(alt_account=alt_account))

    match result:
        case Success(value=registrations):
            return RegistrationListResponse(
                alt_account=str(alt_account),
                registrations=[
                    RegistrationItem(
                        bot_name=registration.bot_name,
                        category_id=registration.category_id,
                        registered_at=registration.registered_at,
                        bot=registration.bot.to_dict(),
                    )
                    for registration in registrations
                ],
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
