"""
User schemas for registration and public profiles.

Password hashes never leave the repository layer; every response model
here exposes only `id`, `username` and `name`.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from bloglist.configs import settings
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User registration model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    username: str = Field(
        ...,
        max_length=50,
        description="Username",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=200,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        description="Password",
        examples=["salainen"],
    )

    @field_validator("username")
    @classmethod
    def validate_username_length(cls, v: str) -> str:
        """Enforce the configured minimum username length."""
        v = v.strip()
        if len(v) < settings.MIN_USERNAME_LENGTH:
            mssg = f"username must be at least {settings.MIN_USERNAME_LENGTH} characters long"
            raise ValueError(mssg)
        return v

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: SecretStr) -> SecretStr:
        """Enforce the configured minimum password length."""
        if len(v.get_secret_value()) < settings.MIN_PASSWORD_LENGTH:
            mssg = f"password must be at least {settings.MIN_PASSWORD_LENGTH} characters long"
            raise ValueError(mssg)
        return v


class UserResponse(BaseModel):
    """User response model (without sensitive information)."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )

    uuid: UUID = Field(alias="id")
    username: str
    name: str | None = None


class UserWithBlogsResponse(UserResponse):
    """Public user profile together with the blogs they own."""

    blogs: list[BlogSummary] = Field(default_factory=list)
