"""Bot domain entity.

A bot is owned by the upstream; the relay only reads it. Only ``nickname``
and ``email`` are interpreted. Every other upstream field is kept in an
opaque bag so the bot can be returned to callers exactly as the upstream
sent it.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class Bot:
    """Upstream bot.

    Attributes:
        nickname: Upstream nickname, unique per upstream.
        email: Account email, may be absent.
        raw: Full upstream object, passed through verbatim.

    Example:
        >>> bot = Bot.from_payload({"nickname": "OGsbotIce", "email": "a@b.c"})
        >>> bot.is_public("ogsboti")
        True
    """

    nickname: str
    email: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Bot | None":
        """Build a Bot from one upstream listing entry.

        Args:
            payload: Upstream JSON object.

        Returns:
            Bot, or None when the entry has no string nickname.
        """
        nickname = payload.get("nickname")
        if not isinstance(nickname, str):
            return None
        email = payload.get("email")
        return cls(
            nickname=nickname,
            email=email if isinstance(email, str) else None,
            raw=dict(payload),
        )

    def is_public(self, prefix: str) -> bool:
        """Whether the nickname starts with ``prefix``, ignoring case."""
        return self.nickname.lower().startswith(prefix.lower())

    def to_dict(self) -> dict[str, Any]:
        """Upstream representation of the bot."""
        return dict(self.raw) if self.raw else {"nickname": self.nickname, "email": self.email}
