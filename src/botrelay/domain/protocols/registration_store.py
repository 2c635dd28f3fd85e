"""Registration store protocol (Correlation Store).

Two-level keyed store: outer key ``alt_account``, inner key ``bot_name``.
The relay keeps it in memory for the process lifetime; the protocol keeps
handlers independent of that choice and lets tests pass their own store.
"""

from typing import Protocol

from botrelay.domain.entities.registration import Registration


class RegistrationStore(Protocol):
    """Protocol for registration storage.

    **Design Principles**:
    - ``put`` is an upsert: the last write for a key wins
    - A single ``put`` is atomic with respect to concurrent ``get``/``put``
      on the same key; readers see the old or the new value, never a mix
    - No multi-key transactions
    """

    def put(self, alt_account: str, bot_name: str, registration: Registration) -> None:
        """Store ``registration`` under ``(alt_account, bot_name)``.

        Overwrites any registration previously stored for that exact pair.
        """
        ...

    def get(self, alt_account: str, bot_name: str) -> Registration | None:
        """Return the registration for the pair, or None."""
        ...

    def list_for_account(self, alt_account: str) -> list[Registration]:
        """Return every registration of ``alt_account`` in insertion order."""
        ...

    def delete(self, alt_account: str, bot_name: str) -> bool:
        """Remove the registration for the pair.

        Returns:
            True if something was removed.
        """
        ...

    def count(self) -> int:
        """Total number of registrations across all accounts."""
        ...
