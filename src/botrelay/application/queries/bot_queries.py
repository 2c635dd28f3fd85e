"""Bot queries (CQRS read operations).

Queries are immutable data containers with no logic; handlers fetch and
filter. Queries never change state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListPublicBots:
    """List the bots of the public pool.

    The pool is defined by a nickname prefix configured on the handler, so
    the query carries no parameters.

    Example:
        >>> result = await handler.handle(ListPublicBots())
    """
