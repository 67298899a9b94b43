"""Auth-related data models."""

from __future__ import annotations

from pydantic import BaseModel, StrictInt


class TokenResponse(BaseModel):
    """Response from the OAuth2 client-credentials token endpoint."""
    access_token: str
    token_type: str = "Bearer"
    expires_in: StrictInt = 0
