"""Authentication service handling credential checks, token issue and registration."""

from bloglist.errors import DuplicateEntryError, InvalidCredentialsError, UsernameTakenError
from bloglist.managers.password_manager import dummy_verify, hash_password, verify_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginRequest, LoginResponse
from bloglist.schemas.user import UserCreate

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str | None, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        Unknown users, missing fields and wrong passwords all raise the same
        error so that callers cannot tell which part was wrong.

        Args:
            username: Username as submitted
            password: Plaintext password as submitted

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username) if username else None
        if not user or not password:
            await dummy_verify()
            logger.info("Login rejected: unknown user or missing field")
            raise InvalidCredentialsError

        if not await verify_password(password, user.password_hash):
            logger.info(f"Login rejected: wrong password for user {user.uuid}")
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Issue an access token for a user.

        Args:
            user: Authenticated user

        Returns:
            LoginResponse: Token plus the user's username and display name
        """
        token = create_access_token(user_id=user.uuid, username=user.username)
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def login(self, credentials: LoginRequest) -> LoginResponse:
        """Authenticate submitted credentials and issue a token."""
        user = await self.authenticate_user(credentials.username, credentials.password)
        logger.info(f"User {user.uuid} logged in")
        return self.create_token_for_user(user)

    async def register_user(self, user_create: UserCreate) -> UserDB:
        """
        Register a new user with a hashed password.

        Args:
            user_create: Validated registration data

        Returns:
            UserDB: The stored user

        Raises:
            UsernameTakenError: If the username already exists
        """
        if await self.user_repo.exists_by_username(user_create.username):
            raise UsernameTakenError(user_create.username)

        password_hash = await hash_password(user_create.password.get_secret_value())
        try:
            user = await self.user_repo.create(
                username=user_create.username,
                password_hash=password_hash,
                name=user_create.name,
            )
        except DuplicateEntryError as e:
            # lost a race against a concurrent registration
            raise UsernameTakenError(user_create.username) from e

        logger.info(f"User {user.uuid} registered")
        return user
