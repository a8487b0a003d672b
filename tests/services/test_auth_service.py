"""Tests for AuthService with the user repository mocked out."""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from pydantic import SecretStr

from bloglist.errors import DuplicateEntryError, InvalidCredentialsError, UsernameTakenError
from bloglist.models import UserDB
from bloglist.schemas.auth import LoginRequest
from bloglist.schemas.user import UserCreate
from bloglist.services import AuthService


@pytest.fixture
def sample_user() -> UserDB:
    """Create a sample user for testing."""
    return UserDB(
        uuid=uuid4(),
        username="testuser",
        name="Test User",
        password_hash="$argon2id$v=19$m=65536,t=3,p=4$somehash",
    )


@pytest.fixture
def mock_user_repo(sample_user: UserDB) -> MagicMock:
    """Create a mock user repository."""
    mock = MagicMock()
    mock.get_by_username = AsyncMock(return_value=sample_user)
    mock.exists_by_username = AsyncMock(return_value=False)
    mock.create = AsyncMock(return_value=sample_user)
    return mock


class TestAuthenticateUser:
    """Credential checks."""

    @pytest.mark.asyncio
    async def test_unknown_user_runs_dummy_verify(self, mock_user_repo: MagicMock) -> None:
        mock_user_repo.get_by_username.return_value = None
        service = AuthService(mock_user_repo)

        with patch("bloglist.services.auth.dummy_verify", new_callable=AsyncMock) as dummy:
            with pytest.raises(InvalidCredentialsError):
                await service.authenticate_user("nobody", "sekret")

        dummy.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, mock_user_repo: MagicMock) -> None:
        service = AuthService(mock_user_repo)

        with patch(
            "bloglist.services.auth.verify_password",
            new_callable=AsyncMock,
            return_value=False,
        ):
            with pytest.raises(InvalidCredentialsError):
                await service.authenticate_user("testuser", "wrong")

    @pytest.mark.asyncio
    async def test_login_returns_token_and_echo(
        self,
        mock_user_repo: MagicMock,
        sample_user: UserDB,
    ) -> None:
        service = AuthService(mock_user_repo)

        with patch(
            "bloglist.services.auth.verify_password",
            new_callable=AsyncMock,
            return_value=True,
        ):
            response = await service.login(LoginRequest(username="testuser", password="sekret"))

        assert response.username == sample_user.username
        assert response.name == sample_user.name
        assert response.token


class TestRegisterUser:
    """Registration rules."""

    @pytest.mark.asyncio
    async def test_existing_username_is_rejected_before_hashing(
        self,
        mock_user_repo: MagicMock,
    ) -> None:
        mock_user_repo.exists_by_username.return_value = True
        service = AuthService(mock_user_repo)

        with patch("bloglist.services.auth.hash_password", new_callable=AsyncMock) as hasher:
            with pytest.raises(UsernameTakenError):
                await service.register_user(
                    UserCreate(username="testuser", password=SecretStr("sekret")),
                )

        hasher.assert_not_awaited()
        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_is_username_taken(self, mock_user_repo: MagicMock) -> None:
        mock_user_repo.create.side_effect = DuplicateEntryError("UNIQUE constraint failed")
        service = AuthService(mock_user_repo)

        with patch(
            "bloglist.services.auth.hash_password",
            new_callable=AsyncMock,
            return_value="hashed",
        ):
            with pytest.raises(UsernameTakenError):
                await service.register_user(
                    UserCreate(username="testuser", password=SecretStr("sekret")),
                )

    @pytest.mark.asyncio
    async def test_password_is_hashed_before_storage(self, mock_user_repo: MagicMock) -> None:
        service = AuthService(mock_user_repo)

        with patch(
            "bloglist.services.auth.hash_password",
            new_callable=AsyncMock,
            return_value="hashed-value",
        ):
            await service.register_user(
                UserCreate(username="newuser", name="New", password=SecretStr("sekret")),
            )

        mock_user_repo.create.assert_awaited_once_with(
            username="newuser",
            password_hash="hashed-value",
            name="New",
        )
