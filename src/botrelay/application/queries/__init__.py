"""Queries (CQRS read operations).

Usage:
    from botrelay.application.queries import ListPublicBots, GetCategorySettings
"""

from botrelay.application.queries.bot_queries import ListPublicBots
from botrelay.application.queries.category_queries import (
    GetCategorySettings,
    ListAllowedCategories,
)
from botrelay.application.queries.registration_queries import (
    ListAccountRegistrations,
)

__all__ = [
    "ListPublicBots",
    "ListAllowedCategories",
    "GetCategorySettings",
    "ListAccountRegistrations",
]
