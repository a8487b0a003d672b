# bloglist/routes/user.py

"""User registration and listing routes."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import AuthServiceDep, UserRepoDep
from bloglist.schemas import BlogSummary, UserCreate, UserResponse, UserWithBlogsResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Register a new user",
    description="Create an account; the password is stored only as a salted hash.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"detail": "username 'mluukkai' is already taken"},
                },
            },
        },
    },
    operation_id="users_register",
)
async def register_user(user_create: UserCreate, auth_service: AuthServiceDep) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    user_create : UserCreate
        Registration data.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    UserResponse
        Created user information, never including the password hash.

    Raises
    ------
    UsernameTakenError
        If the username already exists.
    """
    user = await auth_service.register_user(user_create)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserWithBlogsResponse],
    summary="List users",
    description="List every user with the blogs they own.",
    operation_id="users_list",
)
async def get_users(repo: UserRepoDep) -> list[UserWithBlogsResponse]:
    """List users, each with their blogs (without owner back-references)."""
    rows = await repo.get_all_with_blogs()
    return [
        UserWithBlogsResponse(
            uuid=user.uuid,
            username=user.username,
            name=user.name,
            blogs=[BlogSummary.model_validate(blog) for blog in blogs],
        )
        for user, blogs in rows
    ]
