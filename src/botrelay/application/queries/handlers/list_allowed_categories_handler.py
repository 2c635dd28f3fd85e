"""ListAllowedCategories query handler.

Returns the upstream categories whose id is in the Allowed-Category Set.
The filter runs on every call against a fresh upstream listing; nothing is
cached, so the result is always a subset of the allowed set.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from botrelay.application.queries.category_queries import ListAllowedCategories
from botrelay.core.errors import DomainError
from botrelay.core.result import Failure, Result, Success
from botrelay.domain.entities.category import Category
from botrelay.domain.protocols.logger_protocol import LoggerProtocol
from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol


@dataclass
class CategoryListResult:
    """Allowed category list result DTO.

    Attributes:
        categories: Allowed categories in upstream order.
    """

    categories: list[Category]


class ListAllowedCategoriesHandler:
    """Handler for ListAllowedCategories query.

    Dependencies (injected via constructor):
        - UpstreamClientProtocol: Upstream category listing
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        upstream: UpstreamClientProtocol,
        logger: LoggerProtocol,
        *,
        allowed_categories: Iterable[str],
    ) -> None:
        self._upstream = upstream
        self._logger = logger
        self._allowed_categories = frozenset(allowed_categories)

    async def handle(
        self, query: ListAllowedCategories
    ) -> Result[CategoryListResult, DomainError]:
        """Handle ListAllowedCategories query.

        Returns:
            Success(CategoryListResult): Possibly empty list.
            Failure(DomainError): Configuration or upstream failure.
        """
        result = await self._upstream.list_categories()
        if isinstance(result, Failure):
            return result

        categories = [
            category
            for category in result.value
            if category.id in self._allowed_categories
        ]

        self._logger.info(
            "allowed_categories_listed",
            total_upstream=len(result.value),
            allowed=len(categories),
        )
        return Success(value=CategoryListResult(categories=categories))
