"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Response from the PayPal OAuth2 token endpoints."""
    access_token: str = ""
    token_type: str = "Bearer"
    expires_in: int = 0
    refresh_token: str | None = None
    scope: str | None = None
    app_id: str | None = None
    nonce: str | None = None


class TokenState(BaseModel):
    """The bearer token currently held by a client. Replaced, never edited."""
    access_token: str
    token_type: str = "Bearer"
    expires_at: datetime
    refresh_token: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_response(cls, token: TokenResponse, acquired_at: datetime) -> TokenState:
        return cls(
            access_token=token.access_token,
            token_type=token.token_type,
            expires_at=acquired_at + timedelta(seconds=token.expires_in),
            refresh_token=token.refresh_token,
        )


class TokenStatus(BaseModel):
    """Current state of the cached access token."""
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = Field(default=None)
