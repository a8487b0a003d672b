from bloglist.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    NotAuthenticatedError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.blog import (
    BlogNotFoundError,
    BlogPermissionError,
    blog_exception_handler,
)
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import PasswordHashingError
from bloglist.errors.user import UsernameTakenError
from bloglist.errors.validation import (
    BadRequestError,
    ValidationError,
    bad_request_exception_handler,
    validation_exception_handler,
)
from bloglist.monitoring import get_logger

app_exception_handler = create_exception_handler(get_logger(__name__))

__all__ = [
    "BadRequestError",
    "BaseAppError",
    "BlogNotFoundError",
    "BlogPermissionError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotAuthenticatedError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "UsernameTakenError",
    "ValidationError",
    "app_exception_handler",
    "auth_exception_handler",
    "bad_request_exception_handler",
    "blog_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "validation_exception_handler",
]
