"""Request and response schemas for the relay endpoints.

Field names on the wire are camelCase (``altAccount``, ``categoryId``)
because that is what the browser client sends and expects. Upstream bots
and categories are passed through as plain dicts.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing snake_case fields as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================


class RegisterBotRequest(CamelModel):
    """Body of POST /api/register-bot (JSON or form encoded).

    Every field is optional here; presence is enforced by the handler so
    that a missing field yields the relay's own 400 body.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    auth_code: str | None = Field(default=None, description="Authorization code")
    alt_account: str | None = Field(default=None, description="Alt account id")
    bot_name: str | None = Field(default=None, description="Exact bot nickname")
    category_id: str | None = Field(default=None, description="Target category id")


# =============================================================================
# Responses
# =============================================================================


class PublicBotListResponse(BaseModel):
    """Response of GET /api/public-bots."""

    success: bool = True
    bots: list[dict[str, Any]] = Field(description="Public pool bots, upstream order")


class CategoryListResponse(BaseModel):
    """Response of GET /api/categories."""

    success: bool = True
    categories: list[dict[str, Any]] = Field(description="Allowed categories")


class RegisteredBot(CamelModel):
    """Registration confirmation."""

    nickname: str
    email: str | None = None
    alt_account: str
    category_id: str


class RegisterBotResponse(BaseModel):
    """Response of POST /api/register-bot."""

    success: bool = True
    bot: RegisteredBot


class CategorySettingsResponse(BaseModel):
    """Response of GET /api/category-settings."""

    success: bool = True
    category: dict[str, Any] = Field(description="Upstream category, verbatim")


class RegistrationItem(CamelModel):
    """One stored registration."""

    bot_name: str
    category_id: str
    registered_at: datetime
    bot: dict[str, Any] = Field(description="Bot snapshot taken at registration")


class RegistrationListResponse(CamelModel):
    """Response of GET /api/registrations."""

    success: bool = True
    alt_account: str
    registrations: list[RegistrationItem]


class ErrorResponse(CamelModel):
    """Error body shared by every endpoint.

    Attributes:
        error: Human-readable message.
        kind: Stable machine-readable error code.
        fields: Missing field names (validation errors only).
        upstream_status: Upstream HTTP status (upstream errors only).
        trace_id: Request trace id, also sent as X-Trace-Id.
    """

    error: str
    kind: str
    fields: list[str] | None = None
    upstream_status: int | None = None
    trace_id: str | None = None
