"""Registration domain entity.

A registration is the relay's own record that an alt account registered a
bot under a category. It is keyed by ``(alt_account, bot_name)`` and lives
as long as the process. The bot snapshot is taken at registration time and
is never refreshed, so a registration survives the bot disappearing from
the upstream later on.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from botrelay.domain.entities.bot import Bot


@dataclass(frozen=True, slots=True, kw_only=True)
class Registration:
    """Alt account -> bot -> category association.

    Attributes:
        alt_account: Caller-supplied secondary account identifier.
        bot_name: Exact upstream nickname of the registered bot.
        category_id: Category the bot was registered under.
        bot: Snapshot of the upstream bot at registration time.
        registered_at: When the registration was written.

    Example:
        >>> registration = Registration.create(
        ...     alt_account="acct1", bot=bot, category_id="cat1"
        ... )
        >>> registration.key
        ('acct1', 'Alpha')
    """

    alt_account: str
    bot_name: str
    category_id: str
    bot: Bot
    registered_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, *, alt_account: str, bot: Bot, category_id: str) -> "Registration":
        """Register ``bot`` for ``alt_account`` under ``category_id``."""
        return cls(
            alt_account=alt_account,
            bot_name=bot.nickname,
            category_id=category_id,
            bot=bot,
        )

    @property
    def key(self) -> tuple[str, str]:
        """Composite store key."""
        return (self.alt_account, self.bot_name)
