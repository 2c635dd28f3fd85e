"""ListAccountRegistrations query handler.

Reads the registration store only; the upstream is not contacted, so the
result reflects registrations as they were recorded, even for bots that
have since disappeared upstream.
"""

from botrelay.application.queries.registration_queries import (
    ListAccountRegistrations,
)
from botrelay.core.errors import ValidationError
from botrelay.core.result import Failure, Result, Success
from botrelay.core.validation import validate_required
from botrelay.domain.entities.registration import Registration
from botrelay.domain.protocols.registration_store import RegistrationStore


class ListAccountRegistrationsHandler:
    """Handler for ListAccountRegistrations query."""

    def __init__(self, store: RegistrationStore) -> None:
        self._store = store

    async def handle(
        self, query: ListAccountRegistrations
    ) -> Result[list[Registration], ValidationError]:
        validation = validate_required(
            "altAccount query parameter is required.",
            altAccount=query.alt_account,
        )
        if isinstance(validation, Failure):
            return validation

        return Success(value=self._store.list_for_account(str(query.alt_account)))
