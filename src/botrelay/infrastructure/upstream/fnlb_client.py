"""FNLB API client.

Reads the bot and category listings through the ResilientFetcher and turns
them into domain entities. Handles:
- Authorization header construction (raw key or Bearer scheme)
- Failing fast with ConfigurationError when no key is configured
- JSON parsing of listing endpoints with error handling

Architecture:
    - Infrastructure layer (adapter for the upstream API)
    - Implements UpstreamClientProtocol
    - Returns Result types (no exceptions for upstream errors)
"""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx
import structlog

from botrelay.core.constants import (
    BEARER_PREFIX,
    BOTS_PATH,
    CATEGORIES_PATH,
    RESPONSE_BODY_MAX_LENGTH,
    UPSTREAM_PROVIDER_NAME,
)
from botrelay.core.enums import AuthScheme, ErrorCode
from botrelay.core.errors import ConfigurationError, DomainError
from botrelay.core.result import Failure, Result, Success
from botrelay.domain.entities.bot import Bot
from botrelay.domain.entities.category import Category
from botrelay.domain.errors import UpstreamInvalidResponseError
from botrelay.infrastructure.upstream.resilient_fetcher import ResilientFetcher

EntityT = TypeVar("EntityT", Bot, Category)


class FnlbClient:
    """Client for the FNLB bot-management API.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _api_token: Upstream credential, None when not configured.
        _auth_scheme: How the credential is placed in the header.
        _fetcher: Fetcher used for every request.
        _logger: Structured logger with upstream context.

    Example:
        >>> client = FnlbClient(
        ...     base_url="https://api.fnlb.net",
        ...     api_token=settings.api_token,
        ...     auth_scheme=AuthScheme.RAW,
        ...     fetcher=ResilientFetcher(),
        ... )
        >>> result = await client.list_bots()
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_token: str | None,
        auth_scheme: AuthScheme,
        fetcher: ResilientFetcher,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._auth_scheme = auth_scheme
        self._fetcher = fetcher
        self._logger = structlog.get_logger(f"{UPSTREAM_PROVIDER_NAME}_api")

    async def list_bots(self) -> Result[list[Bot], DomainError]:
        """Fetch every bot visible to the configured key.

        Returns:
            Success(list[Bot]): Bots in upstream order.
            Failure(ConfigurationError): No API token configured.
            Failure(UpstreamError): Fetch or parse failure.
        """
        return await self._fetch_listing(BOTS_PATH, "list_bots", Bot.from_payload)

    async def list_categories(self) -> Result[list[Category], DomainError]:
        """Fetch every category visible to the configured key.

        Returns:
            Success(list[Category]): Categories in upstream order.
            Failure(ConfigurationError): No API token configured.
            Failure(UpstreamError): Fetch or parse failure.
        """
        return await self._fetch_listing(
            CATEGORIES_PATH, "list_categories", Category.from_payload
        )

    def _build_headers(self, api_token: str) -> dict[str, str]:
        """Build request headers for the configured auth scheme."""
        if self._auth_scheme == AuthScheme.BEARER:
            authorization = f"{BEARER_PREFIX}{api_token}"
        else:
            authorization = api_token
        return {
            "Authorization": authorization,
            "Content-Type": "application/json",
        }

    async def _fetch_listing(
        self,
        path: str,
        operation: str,
        build: Callable[[dict[str, Any]], EntityT | None],
    ) -> Result[list[EntityT], DomainError]:
        if self._api_token is None:
            self._logger.error(
                f"{UPSTREAM_PROVIDER_NAME}_api_token_missing",
                operation=operation,
            )
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.CONFIGURATION_MISSING,
                    message="Server config error: API_TOKEN not set.",
                    setting="api_token",
                )
            )

        result = await self._fetcher.fetch(
            f"{self._base_url}{path}",
            headers=self._build_headers(self._api_token),
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        parsed = self._parse_json_list(result.value, operation)
        if isinstance(parsed, Failure):
            return parsed

        entities: list[EntityT] = []
        skipped = 0
        for item in parsed.value:
            entity = build(item) if isinstance(item, dict) else None
            if entity is None:
                skipped += 1
                continue
            entities.append(entity)

        if skipped:
            self._logger.warning(
                f"{UPSTREAM_PROVIDER_NAME}_api_entries_skipped",
                operation=operation,
                skipped=skipped,
            )
        return Success(value=entities)

    def _parse_json_list(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[list[Any], DomainError]:
        """Parse response as a JSON array.

        Args:
            response: Successful HTTP response.
            operation: Operation name for logging.

        Returns:
            Success(list): Parsed JSON array.
            Failure(UpstreamInvalidResponseError): Invalid JSON or not an array.
        """
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{UPSTREAM_PROVIDER_NAME}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UpstreamInvalidResponseError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {UPSTREAM_PROVIDER_NAME.upper()}",
                    provider_name=UPSTREAM_PROVIDER_NAME,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, list):
            self._logger.warning(
                f"{UPSTREAM_PROVIDER_NAME}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=UpstreamInvalidResponseError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Expected a list response from {UPSTREAM_PROVIDER_NAME.upper()}",
                    provider_name=UPSTREAM_PROVIDER_NAME,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.debug(
            f"{UPSTREAM_PROVIDER_NAME}_api_listing_parsed",
            operation=operation,
            count=len(data),
        )
        return Success(value=data)
