# bloglist/dependencies/dependencies.py

"""Application dependencies for sessions, repositories and authentication."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors import InvalidTokenError, NotAuthenticatedError
from bloglist.managers.token_manager import decode_access_token
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas.auth import TokenData
from bloglist.services import AuthService

# auto_error=False so a missing token is reported through NotAuthenticatedError
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(repo: UserRepoDep) -> AuthService:
    """Dependency to get an AuthService bound to the request's session."""
    return AuthService(repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> TokenData:
    """
    Resolve the caller's identity from the bearer token.

    The token's signature is trusted as proof of identity; the user row is
    not looked up again.

    Parameters
    ----------
    request : Request
        Current request; the identity is also stored on `request.state.user`.
    token : str | None
        Bearer token, or None when the header is absent or not a bearer.

    Returns
    -------
    TokenData
        Identity carried by the token.

    Raises
    ------
    NotAuthenticatedError
        If no bearer token was sent.
    InvalidTokenError
        If the token is malformed, expired or badly signed.
    """
    if not token:
        raise NotAuthenticatedError

    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    request.state.user = token_data
    return token_data


CurrentUserDep = Annotated[TokenData, Depends(get_current_user)]
