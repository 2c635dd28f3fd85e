"""Category endpoints.

Endpoints:
    GET /api/categories         - Categories in the Allowed-Category Set
    GET /api/category-settings  - Any upstream category by id

The second endpoint is intentionally not restricted to the allowed set.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from botrelay.application.queries.category_queries import (
    GetCategorySettings,
    ListAllowedCategories,
)
from botrelay.application.queries.handlers.get_category_settings_handler import (
    GetCategorySettingsHandler,
)
from botrelay.application.queries.handlers.list_allowed_categories_handler import (
    ListAllowedCategoriesHandler,
)
from botrelay.core.container import (
    get_get_category_settings_handler,
    get_list_allowed_categories_handler,
)
from botrelay.core.result import Failure, Success
from botrelay.presentation.api.errors import ErrorResponseBuilder
from botrelay.schemas.relay_schemas import (
    CategoryListResponse,
    CategorySettingsResponse,
    ErrorResponse,
)

router = APIRouter(tags=["Categories"])


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    responses={
        500: {"description": "API token not configured", "model": ErrorResponse},
        503: {"description": "Upstream unavailable", "model": ErrorResponse},
    },
    summary="List allowed categories",
)
async def list_categories(
    handler: ListAllowedCategoriesHandler = Depends(get_list_allowed_categories_handler),
) -> CategoryListResponse | JSONResponse:
    """List upstream categories that are in the Allowed-Category Set.

    GET /api/categories -> 200 OK
    """
    result = await handler.handle(ListAllowedCategories())

    match result:
        case Success(value=listing):
            return CategoryListResponse(
                categories=[category.to_dict() for category in listing.categories]
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                upstream_message="Failed to fetch categories.",
            )


@router.get(
    "/category-settings",
    response_model=CategorySettingsResponse,
    responses={
        400: {"description": "categoryId missing", "model": ErrorResponse},
        404: {"description": "Category not found", "model": ErrorResponse},
        500: {"description": "API token not configured", "model": ErrorResponse},
        503: {"description": "Upstream unavailable", "model": ErrorResponse},
    },
    summary="Get category settings",
)
async def get_category_settings(
    category_id: Annotated[
        str | None,
        Query(alias="categoryId", description="Upstream category id"),
    ] = None,
    handler: GetCategorySettingsHandler = Depends(get_get_category_settings_handler),
) -> CategorySettingsResponse | JSONResponse:
    """Return one upstream category verbatim.

    GET /api/category-settings?categoryId=... -> 200 OK
    """
    result = await handler.handle(GetCategorySettings(category_id=category_id))

    match result:
        case Success(value=category):
            return CategorySettingsResponse(category=category.to_dict())
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                upstream_message="Failed to fetch category settings.",
            )
