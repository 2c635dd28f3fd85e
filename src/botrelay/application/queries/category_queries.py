"""Category queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListAllowedCategories:
    """List upstream categories that belong to the Allowed-Category Set."""


@dataclass(frozen=True, kw_only=True)
class GetCategorySettings:
    """Get one upstream category by id.

    Unlike ListAllowedCategories, any upstream category can be looked up.

    Attributes:
        category_id: Upstream category id. Required; None or blank fails
            validation.

    Example:
        >>> query = GetCategorySettings(category_id="67c2fd571906bd75e5239684")
        >>> result = await handler.handle(query)
    """

    category_id: str | None
