from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    CurrentUserDep,
    UserRepoDep,
    get_auth_service,
    get_blog_repository,
    get_current_user,
    get_user_repository,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "CurrentUserDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_repository",
    "get_current_user",
    "get_user_repository",
]
