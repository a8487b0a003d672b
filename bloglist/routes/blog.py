# bloglist/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (public)
  - Get blog by id (public)
  - Create blog (authenticated)
  - Update blog (owner only)
  - Delete blog (owner only)

Every blog response embeds its owner's public fields (`id`, `username`,
`name`). Ownership is decided by comparing the stored owner ID with the
`user_id` claim of the caller's token.
"""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogRepoDep, CurrentUserDep, UserRepoDep
from bloglist.errors import BlogNotFoundError, BlogPermissionError, InvalidTokenError
from bloglist.models import BlogDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository
from bloglist.schemas import BlogCreate, BlogResponse, BlogUpdate, TokenData

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

NOT_FOUND_EXAMPLE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Blog with ID <uuid> not found"}}},
}
FORBIDDEN_EXAMPLE = {
    "description": "Forbidden",
    "content": {
        "application/json": {"example": {"detail": "only the creator can modify a blog"}},
    },
}
UNAUTHORIZED_EXAMPLE = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "token missing"}}},
}


async def _owned_blog(repo: BlogRepository, blog_id: UUID, current_user: TokenData) -> BlogDB:
    """Load a blog and make sure the caller owns it."""
    blog = await repo.get_by_id(blog_id)
    if not blog:
        raise BlogNotFoundError(blog_id)
    if blog.user_id != current_user.user_id:
        raise BlogPermissionError
    return blog


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="List every blog in creation order with its owner populated.",
    operation_id="blogs_list",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogResponse]:
    """
    List all blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        All blogs, oldest first.
    """
    rows = await repo.get_all_with_owner()
    return [BlogResponse.from_db(blog, owner) for blog, owner in rows]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={404: NOT_FOUND_EXAMPLE},
    operation_id="blogs_get",
)
async def get_blog(blog_id: UUID, repo: BlogRepoDep) -> BlogResponse:
    """
    Get a single blog.

    Raises
    ------
    BlogNotFoundError
        If no blog has this ID.
    """
    row = await repo.get_with_owner(blog_id)
    if not row:
        raise BlogNotFoundError(blog_id)
    return BlogResponse.from_db(*row)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Create blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": "Validation failed"}}},
        },
        401: UNAUTHORIZED_EXAMPLE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: BlogCreate,
    repo: BlogRepoDep,
    user_repo: UserRepoDep,
    current_user: CurrentUserDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog payload; any `user` field is ignored.
    repo : BlogRepository
        Repository dependency.
    user_repo : UserRepository
        Used to load the owner named by the token.
    current_user : TokenData
        Identity of the caller, who becomes the owner.

    Returns
    -------
    BlogResponse
        The created blog with its owner populated.

    Raises
    ------
    InvalidTokenError
        If the token names a user that no longer exists.
    """
    owner = await user_repo.get_by_id(current_user.user_id)
    if not owner:
        raise InvalidTokenError
    db_blog = await repo.create(blog, owner.uuid)
    return BlogResponse.from_db(db_blog, owner)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Update blog fields. Only provided fields will be updated.",
    responses={401: UNAUTHORIZED_EXAMPLE, 403: FORBIDDEN_EXAMPLE, 404: NOT_FOUND_EXAMPLE},
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    blog_update: BlogUpdate,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> BlogResponse:
    """
    Update a blog owned by the caller.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    BlogPermissionError
        If the caller is not the owner.
    """
    existing = await _owned_blog(repo, blog_id, current_user)
    await repo.update(existing, blog_update)
    row = await repo.get_with_owner(blog_id)
    if not row:
        raise BlogNotFoundError(blog_id)
    return BlogResponse.from_db(*row)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog by its UUID. Only the creator may delete it.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED_EXAMPLE,
        403: FORBIDDEN_EXAMPLE,
        404: NOT_FOUND_EXAMPLE,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> Response:
    """
    Delete blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    repo : BlogRepository
        Repository dependency.
    current_user : TokenData
        Authenticated caller.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist, including when a concurrent request
        removed it first.
    BlogPermissionError
        If the caller is not the owner.
    """
    await _owned_blog(repo, blog_id, current_user)
    if not await repo.delete(blog_id):
        raise BlogNotFoundError(blog_id)
    logger.info(f"Blog {blog_id} deleted by user {current_user.user_id}")
    return Response(status_code=HTTP_204_NO_CONTENT)
