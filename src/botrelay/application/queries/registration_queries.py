"""Registration queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListAccountRegistrations:
    """List every bot registered by an alt account.

    Attributes:
        alt_account: Alt account identifier. Required.
    """

    alt_account: str | None
