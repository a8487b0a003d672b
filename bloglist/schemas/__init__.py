from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogOwner,
    BlogResponse,
    BlogSummary,
    BlogUpdate,
)
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserCreate, UserResponse, UserWithBlogsResponse

__all__ = [
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogSummary",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserCreate",
    "UserResponse",
    "UserWithBlogsResponse",
]
