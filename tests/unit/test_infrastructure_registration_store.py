"""Tests for the in-memory registration store."""

from botrelay.domain.entities import Registration
from botrelay.infrastructure.persistence.in_memory_registration_store import (
    InMemoryRegistrationStore,
)
from tests.conftest import make_bot


def register(alt_account: str, nickname: str, category_id: str) -> Registration:
    return Registration.create(
        alt_account=alt_account,
        bot=make_bot(nickname),
        category_id=category_id,
    )


class TestInMemoryRegistrationStore:
    def test_get_unknown_returns_none(self, store: InMemoryRegistrationStore) -> None:
        assert store.get("acct1", "Alpha") is None
        assert store.count() == 0

    def test_put_then_get(self, store: InMemoryRegistrationStore) -> None:
        registration = register("acct1", "Alpha", "cat1")

        store.put("acct1", "Alpha", registration)

        assert store.get("acct1", "Alpha") is registration
        assert store.count() == 1

    def test_put_is_last_write_wins(self, store: InMemoryRegistrationStore) -> None:
        store.put("acct1", "Alpha", register("acct1", "Alpha", "cat1"))
        store.put("acct1", "Alpha", register("acct1", "Alpha", "cat2"))

        stored = store.get("acct1", "Alpha")

        assert stored is not None
        assert stored.category_id == "cat2"
        assert store.count() == 1

    def test_keys_are_independent(self, store: InMemoryRegistrationStore) -> None:
        store.put("acct1", "Alpha", register("acct1", "Alpha", "cat1"))
        store.put("acct1", "Beta", register("acct1", "Beta", "cat1"))
        store.put("acct2", "Alpha", register("acct2", "Alpha", "cat9"))

        assert [r.bot_name for r in store.list_for_account("acct1")] == ["Alpha", "Beta"]
        assert [r.category_id for r in store.list_for_account("acct2")] == ["cat9"]
        assert store.list_for_account("acct3") == []
        assert store.count() == 3

    def test_delete(self, store: InMemoryRegistrationStore) -> None:
        store.put("acct1", "Alpha", register("acct1", "Alpha", "cat1"))

        assert store.delete("acct1", "Alpha") is True
        assert store.delete("acct1", "Alpha") is False
        assert store.delete("missing", "Alpha") is False
        assert store.get("acct1", "Alpha") is None
        assert store.count() == 0
