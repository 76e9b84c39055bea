"""Data model for the OAuth token exchange."""

from __future__ import annotations

from pydantic import Field

from roosterteeth.models.base import NonEmptyStr, RTModel


class AccessToken(RTModel):
    """Password-grant token response.

    Only ``access_token`` is used by the client; the rest is kept so
    callers can inspect expiry and account identifiers. Both token values
    are left out of ``repr``/``str``.
    """

    access_token: NonEmptyStr = Field(repr=False)
    token_type: str
    expires_in: int
    refresh_token: str | None = Field(default=None, repr=False)
    scope: str | None = None
    created_at: int | None = None
    user_id: int | None = None
    uuid: str | None = None
