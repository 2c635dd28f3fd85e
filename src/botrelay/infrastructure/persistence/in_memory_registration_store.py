"""In-memory registration store.

Registrations live in a ``dict[alt_account, dict[bot_name, Registration]]``
for the lifetime of the process; nothing is persisted across restarts.

Registrations are frozen, so ``put`` replaces the whole value with a single
dict assignment and a concurrent ``get`` sees either the old or the new
registration. All handlers run on one event loop, so no lock is taken.
"""

from botrelay.domain.entities.registration import Registration


class InMemoryRegistrationStore:
    """Process-local implementation of RegistrationStore.

    Example:
        >>> store = InMemoryRegistrationStore()
        >>> store.put("acct1", "Alpha", registration)
        >>> store.get("acct1", "Alpha") is registration
        True
    """

    def __init__(self) -> None:
        self._registrations: dict[str, dict[str, Registration]] = {}

    def put(self, alt_account: str, bot_name: str, registration: Registration) -> None:
        self._registrations.setdefault(alt_account, {})[bot_name] = registration

    def get(self, alt_account: str, bot_name: str) -> Registration | None:
        return self._registrations.get(alt_account, {}).get(bot_name)

    def list_for_account(self, alt_account: str) -> list[Registration]:
        return list(self._registrations.get(alt_account, {}).values())

    def delete(self, alt_account: str, bot_name: str) -> bool:
        account = self._registrations.get(alt_account)
        if account is None or bot_name not in account:
            return False
        del account[bot_name]
        if not account:
            del self._registrations[alt_account]
        return True

    def count(self) -> int:
        return sum(len(account) for account in self._registrations.values())
