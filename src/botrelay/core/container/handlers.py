"""Handler dependency factories.

Request-scoped handler instances wired from app-scoped singletons and
settings. Used as FastAPI dependencies:

    handler: RegisterBotHandler = Depends(get_register_bot_handler)
"""

from fastapi import Depends

from botrelay.application.commands.handlers.register_bot_handler import (
    RegisterBotHandler,
)
from botrelay.application.queries.handlers.get_category_settings_handler import (
    GetCategorySettingsHandler,
)
from botrelay.application.queries.handlers.list_account_registrations_handler import (
    ListAccountRegistrationsHandler,
)
from botrelay.application.queries.handlers.list_allowed_categories_handler import (
    ListAllowedCategoriesHandler,
)
from botrelay.application.queries.handlers.list_public_bots_handler import (
    ListPublicBotsHandler,
)
from botrelay.core.config import Settings
from botrelay.core.container.infrastructure import (
    get_app_settings,
    get_logger,
    get_registration_store,
    get_upstream_client,
)
from botrelay.domain.protocols.logger_protocol import LoggerProtocol
from botrelay.domain.protocols.registration_store import RegistrationStore
from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol


def get_list_public_bots_handler(
    upstream: UpstreamClientProtocol = Depends(get_upstream_client),
    logger: LoggerProtocol = Depends(get_logger),
    settings: Settings = Depends(get_app_settings),
) -> ListPublicBotsHandler:
    """Get ListPublicBots query handler (request-scoped).

    The public prefix comes from the settings the app was created with.
    """
    return ListPublicBotsHandler(
        upstream,
        logger,
        public_prefix=settings.public_bot_prefix,
    )


def get_list_allowed_categories_handler(
    upstream: UpstreamClientProtocol = Depends(get_upstream_client),
    logger: LoggerProtocol = Depends(get_logger),
    settings: Settings = Depends(get_app_settings),
) -> ListAllowedCategoriesHandler:
    """Get ListAllowedCategories query handler (request-scoped)."""
    return ListAllowedCategoriesHandler(
        upstream,
        logger,
        allowed_categories=settings.allowed_category_set,
    )


def get_register_bot_handler(
    upstream: UpstreamClientProtocol = Depends(get_upstream_client),
    store: RegistrationStore = Depends(get_registration_store),
    logger: LoggerProtocol = Depends(get_logger),
) -> RegisterBotHandler:
    """Get RegisterBot command handler (request-scoped)."""
    return RegisterBotHandler(upstream, store, logger)


def get_get_category_settings_handler(
    upstream: UpstreamClientProtocol = Depends(get_upstream_client),
    logger: LoggerProtocol = Depends(get_logger),
) -> GetCategorySettingsHandler:
    """Get GetCategorySettings query handler (request-scoped)."""
    return GetCategorySettingsHandler(upstream, logger)


def get_list_account_registrations_handler(
    store: RegistrationStore = Depends(get_registration_store),
) -> ListAccountRegistrationsHandler:
    """Get ListAccountRegistrations query handler (request-scoped)."""
    return ListAccountRegistrationsHandler(store)
