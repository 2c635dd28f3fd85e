"""RegisterBot command handler.

Registers an upstream bot for an alt account under a category.

Flow:
1. Validate that all four fields are present (before any upstream call)
2. Fetch the current upstream bot listing
3. Find the bot by exact, case-sensitive nickname
4. Upsert a Registration keyed by (alt_account, bot_name)

The bot's existence is checked only here. A stored registration is never
re-verified, so it outlives the bot disappearing upstream.

Architecture:
- Application layer handler (orchestrates business logic)
- Uses Result types for error handling
- The store is written only after every check has passed, so a failed
  command leaves the store untouched
"""

from dataclasses import dataclass

from botrelay.application.commands.registration_commands import RegisterBot
from botrelay.core.enums import ErrorCode
from botrelay.core.errors import DomainError, NotFoundError
from botrelay.core.result import Failure, Result, Success
from botrelay.core.validation import validate_required
from botrelay.domain.entities.registration import Registration
from botrelay.domain.protocols.logger_protocol import LoggerProtocol
from botrelay.domain.protocols.registration_store import RegistrationStore
from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol


@dataclass
class RegistrationResult:
    """Registration confirmation DTO.

    Attributes:
        nickname: Upstream nickname of the registered bot.
        email: Upstream email of the bot.
        alt_account: Alt account the bot was registered for.
        category_id: Category the bot was registered under.
    """

    nickname: str
    email: str | None
    alt_account: str
    category_id: str


class RegisterBotHandler:
    """Handler for RegisterBot command.

    Dependencies (injected via constructor):
        - UpstreamClientProtocol: Upstream bot listing
        - RegistrationStore: Correlation store
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        upstream: UpstreamClientProtocol,
        store: RegistrationStore,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            upstream: Upstream API client.
            store: Registration store.
            logger: Structured logger.
        """
        self._upstream = upstream
        self._store = store
        self._logger = logger

    async def handle(self, cmd: RegisterBot) -> Result[RegistrationResult, DomainError]:
        """Handle RegisterBot command.

        Args:
            cmd: RegisterBot command.

        Returns:
            Success(RegistrationResult): Bot registered (or re-registered).
            Failure(ValidationError): A field is missing (no upstream call).
            Failure(NotFoundError): No upstream bot with that nickname.
            Failure(DomainError): Configuration or upstream failure.

        Side Effects:
            - Upserts a Registration in the store (on success only)
        """
        validation = validate_required(
            authCode=cmd.auth_code,
            altAccount=cmd.alt_account,
            botName=cmd.bot_name,
            categoryId=cmd.category_id,
        )
        if isinstance(validation, Failure):
            return validation

        # Narrowed by validation above
        alt_account = str(cmd.alt_account)
        bot_name = str(cmd.bot_name)
        category_id = str(cmd.category_id)

        result = await self._upstream.list_bots()
        if isinstance(result, Failure):
            return result

        bot = next((b for b in result.value if b.nickname == bot_name), None)
        if bot is None:
            self._logger.info(
                "bot_not_found",
                alt_account=alt_account,
                bot_name=bot_name,
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.BOT_NOT_FOUND,
                    message="Bot not found with the given nickname.",
                    resource_type="bot",
                    resource_id=bot_name,
                )
            )

        previous = self._store.get(alt_account, bot_name)
        registration = Registration.create(
            alt_account=alt_account,
            bot=bot,
            category_id=category_id,
        )
        self._store.put(*registration.key, registration)

        self._logger.info(
            "bot_registered",
            alt_account=alt_account,
            bot_name=bot_name,
            category_id=category_id,
            replaced_category_id=previous.category_id if previous else None,
        )
        return Success(
            value=RegistrationResult(
                nickname=bot.nickname,
                email=bot.email,
                alt_account=alt_account,
                category_id=category_id,
            )
        )
