"""Tests for the Argon2 password hasher."""

import pytest

from bloglist.errors import PasswordHashingError
from bloglist.managers.password_manager import (
    PasswordHasher,
    dummy_verify,
    hash_password,
    verify_password,
)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    """Synchronous hasher behaviour."""

    def test_hash_is_argon2_and_not_plaintext(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("sekret")

        assert hashed != "sekret"
        assert hashed.startswith("$argon2id$")

    def test_same_password_hashes_differently(self, hasher: PasswordHasher) -> None:
        """Each hash carries its own salt."""
        assert hasher.hash("sekret") != hasher.hash("sekret")

    def test_verify_accepts_correct_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("sekret")

        assert hasher.verify("sekret", hashed) is True

    def test_verify_rejects_wrong_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("sekret")

        assert hasher.verify("wrong", hashed) is False

    def test_verify_rejects_corrupted_hash(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("sekret", "not-a-hash") is False
        assert hasher.verify("sekret", "") is False

    def test_empty_password_cannot_be_hashed(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_backend_failure_is_wrapped(
        self,
        hasher: PasswordHasher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def broken_hash(secret: str) -> str:
            raise ValueError(secret)

        monkeypatch.setattr(hasher.pwd_context, "hash", broken_hash)

        with pytest.raises(PasswordHashingError):
            hasher.hash("sekret")

    def test_dummy_verify_is_false(self, hasher: PasswordHasher) -> None:
        assert hasher.dummy_verify() is False


class TestModuleLevelHelpers:
    """Coroutines that run the default hasher off the event loop."""

    @pytest.mark.asyncio
    async def test_hash_then_verify(self) -> None:
        hashed = await hash_password("salainen")

        assert await verify_password("salainen", hashed) is True
        assert await verify_password("sekret", hashed) is False

    @pytest.mark.asyncio
    async def test_dummy_verify(self) -> None:
        assert await dummy_verify() is False
