"""Result types for railway-oriented programming.

Upstream calls and handlers return a Result instead of raising, so every
failure case (validation, not found, upstream outage) is explicit at the
call site and easy to assert in tests.

Usage:
    result = await client.list_bots()
    match result:
        case Success(value=bots):
            ...
        case Failure(error=error):
            logger.warning("bots_unavailable", error=str(error))
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
