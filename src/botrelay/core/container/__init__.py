"""Container module - Centralized dependency injection.

The container is organized into modules:
- infrastructure: Logger singleton, per-app builders and their request
  dependencies (settings, store, upstream client)
- handlers: Request-scoped handler factories for FastAPI ``Depends``

Tests replace any of these with ``app.dependency_overrides``.
"""

from botrelay.core.container.handlers import (
    get_get_category_settings_handler,
    get_list_account_registrations_handler,
    get_list_allowed_categories_handler,
    get_list_public_bots_handler,
    get_register_bot_handler,
)
from botrelay.core.container.infrastructure import (
    create_fetcher,
    create_registration_store,
    create_upstream_client,
    get_app_settings,
    get_logger,
    get_registration_store,
    get_upstream_client,
)

__all__ = [
    # Infrastructure
    "get_logger",
    "create_registration_store",
    "create_fetcher",
    "create_upstream_client",
    "get_app_settings",
    "get_registration_store",
    "get_upstream_client",
    # Handlers
    "get_list_public_bots_handler",
    "get_list_allowed_categories_handler",
    "get_register_bot_handler",
    "get_get_category_settings_handler",
    "get_list_account_registrations_handler",
]
