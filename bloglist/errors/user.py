"""User registration errors."""

from bloglist.errors.validation import ValidationError


class UsernameTakenError(ValidationError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"username '{username}' is already taken")
