"""Pytest configuration and shared test doubles.

Provides:
1. Marker registration (unit, api)
2. Entity builders for upstream payloads
3. FakeUpstreamClient: in-memory UpstreamClientProtocol that counts calls,
   used to prove validation happens before any upstream access
4. Store and logger fixtures
"""

from typing import Any
from unittest.mock import MagicMock

import pytest

from botrelay.core.errors import DomainError
from botrelay.core.result import Failure, Result, Success
from botrelay.domain.entities.bot import Bot
from botrelay.domain.entities.category import Category
from botrelay.infrastructure.persistence.in_memory_registration_store import (
    InMemoryRegistrationStore,
)


def make_bot(nickname: str, email: str | None = None, **extra: Any) -> Bot:
    """Build a Bot the way the upstream client would."""
    payload: dict[str, Any] = {"nickname": nickname, **extra}
    if email is not None:
        payload["email"] = email
    bot = Bot.from_payload(payload)
    assert bot is not None
    return bot


def make_category(category_id: str, **extra: Any) -> Category:
    """Build a Category the way the upstream client would."""
    category = Category.from_payload({"id": category_id, **extra})
    assert category is not None
    return category


class FakeUpstreamClient:
    """In-memory UpstreamClientProtocol.

    Returns the configured listings, or ``error`` for every call when set.
    """

    def __init__(
        self,
        *,
        bots: list[Bot] | None = None,
        categories: list[Category] | None = None,
        error: DomainError | None = None,
    ) -> None:
        self.bots = bots or []
        self.categories = categories or []
        self.error = error
        self.list_bots_calls = 0
        self.list_categories_calls = 0

    @property
    def calls(self) -> int:
        return self.list_bots_calls + self.list_categories_calls

    async def list_bots(self) -> Result[list[Bot], DomainError]:
        self.list_bots_calls += 1
        if self.error is not None:
            return Failure(error=self.error)
        return Success(value=list(self.bots))

    async def list_categories(self) -> Result[list[Category], DomainError]:
        self.list_categories_calls += 1
        if self.error is not None:
            return Failure(error=self.error)
        return Success(value=list(self.categories))


@pytest.fixture
def store() -> InMemoryRegistrationStore:
    """Fresh registration store per test."""
    return InMemoryRegistrationStore()


@pytest.fixture
def logger() -> MagicMock:
    """Logger double; assert on calls where log output matters."""
    return MagicMock()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
