"""ListPublicBots query handler.

Fetches the upstream bot listing and keeps the public pool: bots whose
nickname starts with the configured prefix, ignoring case. Upstream order
is preserved and an empty pool is a valid result.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError] (explicit error handling)
- Side-effect free
"""

from dataclasses import dataclass

from botrelay.application.queries.bot_queries import ListPublicBots
from botrelay.core.errors import DomainError
from botrelay.core.result import Failure, Result, Success
from botrelay.domain.entities.bot import Bot
from botrelay.domain.protocols.logger_protocol import LoggerProtocol
from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol


@dataclass
class PublicBotListResult:
    """Public bot list result DTO.

    Attributes:
        bots: Public bots in upstream order.
        total_upstream: Size of the unfiltered upstream listing.
    """

    bots: list[Bot]
    total_upstream: int


class ListPublicBotsHandler:
    """Handler for ListPublicBots query.

    Dependencies (injected via constructor):
        - UpstreamClientProtocol: Upstream bot listing
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        upstream: UpstreamClientProtocol,
        logger: LoggerProtocol,
        *,
        public_prefix: str,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            upstream: Upstream API client.
            logger: Structured logger.
            public_prefix: Nickname prefix of the public pool.
        """
        self._upstream = upstream
        self._logger = logger
        self._public_prefix = public_prefix

    async def handle(
        self, query: ListPublicBots
    ) -> Result[PublicBotListResult, DomainError]:
        """Handle ListPublicBots query.

        Args:
            query: ListPublicBots query.

        Returns:
            Success(PublicBotListResult): Possibly empty list of public bots.
            Failure(DomainError): Configuration or upstream failure.
        """
        result = await self._upstream.list_bots()
        if isinstance(result, Failure):
            return result

        bots = result.value
        public_bots = [bot for bot in bots if bot.is_public(self._public_prefix)]

        self._logger.info(
            "public_bots_listed",
            total_upstream=len(bots),
            public=len(public_bots),
        )
        return Success(
            value=PublicBotListResult(bots=public_bots, total_upstream=len(bots))
        )
