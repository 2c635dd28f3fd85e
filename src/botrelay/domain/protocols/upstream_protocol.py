"""Upstream client protocol.

The FNLB API is the only upstream; this protocol exists so handlers depend
on a port rather than on httpx, and so tests can hand handlers a fake
client that records whether it was called.
"""

from typing import Protocol

from botrelay.core.errors import DomainError
from botrelay.core.result import Result
from botrelay.domain.entities.bot import Bot
from botrelay.domain.entities.category import Category


class UpstreamClientProtocol(Protocol):
    """Read access to the upstream bot and category listings.

    Implementations return ``ConfigurationError`` before any network call
    when no credential is configured, and an ``UpstreamError`` subclass for
    every upstream failure.
    """

    async def list_bots(self) -> Result[list[Bot], DomainError]:
        """Fetch the full upstream bot listing, in upstream order."""
        ...

    async def list_categories(self) -> Result[list[Category], DomainError]:
        """Fetch the full upstream category listing, in upstream order."""
        ...
