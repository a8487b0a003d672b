"""Blog errors."""

from uuid import UUID

from starlette.status import HTTP_403_FORBIDDEN

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import RecordNotFoundError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class BlogNotFoundError(RecordNotFoundError):
    """Raised when no blog exists for the requested ID."""

    def __init__(self, blog_id: UUID) -> None:
        super().__init__(f"Blog with ID {blog_id} not found")


class BlogPermissionError(BaseAppError):
    """Raised when a user modifies a blog they do not own."""

    def __init__(self, detail: str = "only the creator can modify a blog") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


blog_exception_handler = create_exception_handler(logger)
