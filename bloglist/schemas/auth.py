from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class LoginRequest(BaseModel):
    """
    Login credentials.

    Both fields are optional at the schema level so that a missing or
    non-string field is reported as bad credentials (401) instead of a
    validation failure.
    """

    model_config = ConfigDict(extra="ignore")

    username: str | None = None
    password: str | None = None

    @field_validator("username", "password", mode="before")
    @classmethod
    def drop_non_strings(cls, v: Any) -> str | None:
        """Treat anything but a string as absent."""
        return v if isinstance(v, str) else None


class LoginResponse(BaseModel):
    """Bearer token together with a display echo of the user."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Identity extracted from a verified access token."""

    username: str
    user_id: UUID
    jti: str
    token_type: str = "access"
