"""Infrastructure dependency factories.

Process-scoped singleton:
- Logging (structlog console adapter)

Application-scoped objects, built once by ``create_app`` from the settings
the app was created with and kept on ``app.state``:
- Settings
- Registration store (in-memory, one per app)
- Upstream client (FNLB API) and its resilient fetcher

The ``get_*`` dependencies read them back from the request's app, so an app
built with explicit settings never falls back to the environment.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Request

from botrelay.core.config import Settings, get_settings

if TYPE_CHECKING:
    from botrelay.domain.protocols.logger_protocol import LoggerProtocol
    from botrelay.domain.protocols.registration_store import RegistrationStore
    from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol
    from botrelay.infrastructure.upstream.resilient_fetcher import ResilientFetcher


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Development gets the human-readable renderer; every other environment
    gets JSON lines.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from botrelay.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# =============================================================================
# Builders (called once per app by create_app)
# =============================================================================


def create_registration_store() -> "RegistrationStore":
    """Build an empty registration store.

    The store is process-local; registrations are lost on restart.
    """
    from botrelay.infrastructure.persistence.in_memory_registration_store import (
        InMemoryRegistrationStore,
    )

    return InMemoryRegistrationStore()


def create_fetcher(settings: Settings) -> "ResilientFetcher":
    """Build a resilient fetcher with the retry policy from ``settings``."""
    from botrelay.infrastructure.upstream.resilient_fetcher import ResilientFetcher

    return ResilientFetcher(
        timeout=settings.upstream_timeout,
        max_retries=settings.upstream_max_retries,
        retry_after_default=settings.upstream_retry_after_default,
        retry_after_max=settings.upstream_retry_after_max,
    )


def create_upstream_client(settings: Settings) -> "UpstreamClientProtocol":
    """Build the upstream API client.

    A missing API token does not fail here; the client reports a
    ConfigurationError on every call instead, before touching the network.

    Returns:
        UpstreamClientProtocol implementation (FnlbClient).
    """
    from botrelay.infrastructure.upstream.fnlb_client import FnlbClient

    return FnlbClient(
        base_url=settings.upstream_api_base_url,
        api_token=settings.api_token,
        auth_scheme=settings.upstream_auth_scheme,
        fetcher=create_fetcher(settings),
    )


# =============================================================================
# Request dependencies
# =============================================================================


def get_app_settings(request: Request) -> Settings:
    """Settings the current app was created with."""
    return request.app.state.settings


def get_registration_store(request: Request) -> "RegistrationStore":
    """Registration store of the current app."""
    return request.app.state.registration_store


def get_upstream_client(request: Request) -> "UpstreamClientProtocol":
    """Upstream API client of the current app."""
    return request.app.state.upstream_client
