"""Registration commands (CQRS write operations).

Commands are immutable data containers with imperative names. Fields are
optional at the type level because presence is checked by the handler,
which must reject incomplete commands before touching the upstream.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterBot:
    """Register an upstream bot for an alt account under a category.

    Attributes:
        auth_code: Caller's authorization code. Required but not used yet;
            reserved for a future upstream token exchange.
        alt_account: Alt account identifier (outer store key).
        bot_name: Exact, case-sensitive upstream nickname (inner store key).
        category_id: Category to register the bot under.

    Example:
        >>> cmd = RegisterBot(
        ...     auth_code="x",
        ...     alt_account="acct1",
        ...     bot_name="Alpha",
        ...     category_id="cat1",
        ... )
        >>> result = await handler.handle(cmd)
    """

    auth_code: str | None
    alt_account: str | None
    bot_name: str | None
    category_id: str | None
