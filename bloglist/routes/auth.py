"""Authentication route issuing bearer tokens."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import AuthServiceDep
from bloglist.schemas.auth import LoginRequest, LoginResponse

router = APIRouter(prefix="/api", tags=["🔐 Auth"])


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login_for_access_token(
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Login with username and password.

    Parameters
    ----------
    credentials : LoginRequest
        JSON body with `username` and `password`.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    LoginResponse
        Access token with the user's username and display name.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails or a field is missing.
    """
    return await auth_service.login(credentials)
