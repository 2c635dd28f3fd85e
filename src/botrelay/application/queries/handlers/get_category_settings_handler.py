"""GetCategorySettings query handler.

Looks up a single upstream category by id and returns it verbatim.

This lookup deliberately ignores the Allowed-Category Set: any category
the upstream knows about can be read here, while ListAllowedCategories
only ever exposes the allowed subset.
"""

from botrelay.application.queries.category_queries import GetCategorySettings
from botrelay.core.enums import ErrorCode
from botrelay.core.errors import DomainError, NotFoundError
from botrelay.core.result import Failure, Result, Success
from botrelay.core.validation import validate_required
from botrelay.domain.entities.category import Category
from botrelay.domain.protocols.logger_protocol import LoggerProtocol
from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol


class GetCategorySettingsHandler:
    """Handler for GetCategorySettings query.

    Dependencies (injected via constructor):
        - UpstreamClientProtocol: Upstream category listing
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        upstream: UpstreamClientProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._upstream = upstream
        self._logger = logger

    async def handle(
        self, query: GetCategorySettings
    ) -> Result[Category, DomainError]:
        """Handle GetCategorySettings query.

        Args:
            query: GetCategorySettings with the category id.

        Returns:
            Success(Category): The upstream category.
            Failure(ValidationError): category_id missing (no upstream call).
            Failure(NotFoundError): No upstream category with that id.
            Failure(DomainError): Configuration or upstream failure.
        """
        validation = validate_required(
            "categoryId query parameter is required.",
            categoryId=query.category_id,
        )
        if isinstance(validation, Failure):
            return validation

        result = await self._upstream.list_categories()
        if isinstance(result, Failure):
            return result

        category = next(
            (c for c in result.value if c.id == query.category_id),
            None,
        )
        if category is None:
            self._logger.info("category_not_found", category_id=query.category_id)
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.CATEGORY_NOT_FOUND,
                    message="Category not found.",
                    resource_type="category",
                    resource_id=str(query.category_id),
                )
            )

        return Success(value=category)
