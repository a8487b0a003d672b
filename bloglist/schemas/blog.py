"""
Blog schemas for request bodies and responses.

Owner information never comes from the client: any `user` field in a
request body is ignored and the owner is taken from the bearer token.
"""

from math import isfinite
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from bloglist.models import BlogDB, UserDB

TitleText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=300)]
UrlText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=2000)]
AuthorText = Annotated[str, StringConstraints(max_length=200)]

# upper bound of the 32-bit INTEGER column holding the count
MAX_LIKES = 2**31 - 1


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is not a like count
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and isfinite(value)


def _checked_likes(value: int | float) -> int:
    likes = int(value)
    if likes < 0:
        mssg = "likes must be zero or greater"
        raise ValueError(mssg)
    if likes > MAX_LIKES:
        mssg = f"likes must be at most {MAX_LIKES}"
        raise ValueError(mssg)
    return likes


class BlogCreate(BaseModel):
    """Blog creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(extra="ignore")

    title: TitleText = Field(
        ...,
        description="Blog title",
        examples=["React patterns"],
    )
    author: AuthorText | None = Field(
        default=None,
        description="Blog author, passed through verbatim",
        examples=["Michael Chan"],
    )
    url: UrlText = Field(
        ...,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int = Field(default=0, description="Like count (0 when missing or not a number)")

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, v: Any) -> int:
        """Fall back to 0 for anything that is not a finite number."""
        if not _is_number(v):
            return 0
        return _checked_likes(v)


class BlogUpdate(BaseModel):
    """Partial blog update; omitted fields keep their stored value."""

    model_config = ConfigDict(extra="ignore")

    title: TitleText | None = None
    author: AuthorText | None = None
    url: UrlText | None = None
    likes: int | None = None

    @field_validator("likes", mode="before")
    @classmethod
    def validate_likes(cls, v: Any) -> int | None:
        """Require an explicit like count to be a non-negative number."""
        if v is None:
            return None
        if not _is_number(v):
            mssg = "likes must be a number"
            raise ValueError(mssg)
        return _checked_likes(v)


class BlogOwner(BaseModel):
    """Owner information embedded in blog responses (without sensitive data)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    uuid: UUID = Field(alias="id")
    username: str
    name: str | None = None


class BlogSummary(BaseModel):
    """Blog fields without the owner reference."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0


class BlogResponse(BlogSummary):
    """Blog response model with the owner populated."""

    user: BlogOwner | None = None

    @classmethod
    def from_db(cls, blog: BlogDB, owner: UserDB | None) -> "BlogResponse":
        """Build a response from a blog row and its owning user row."""
        return cls(
            id=blog.id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            user=BlogOwner.model_validate(owner) if owner else None,
        )
