"""Category domain entity.

Categories are upstream groupings bots can be registered under. Only ``id``
is interpreted; the rest of the object is forwarded verbatim.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class Category:
    """Upstream category.

    Attributes:
        id: Stable upstream identifier.
        raw: Full upstream object, passed through verbatim.
    """

    id: str
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Category | None":
        """Build a Category from one upstream listing entry.

        Returns:
            Category, or None when the entry has no string id.
        """
        category_id = payload.get("id")
        if not isinstance(category_id, str):
            return None
        return cls(id=category_id, raw=dict(payload))

    def to_dict(self) -> dict[str, Any]:
        """Upstream representation of the category."""
        return dict(self.raw) if self.raw else {"id": self.id}
