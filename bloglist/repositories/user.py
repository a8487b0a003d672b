"""User repository for database operations."""

from typing import cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.models import BlogDB, UserDB
from bloglist.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    The repository stores password hashes as given; hashing happens in
    the route before a user ever reaches this layer.
    """

    model = UserDB
    id_field = "uuid"

    async def create(
        self,
        username: str,
        password_hash: str,
        name: str | None = None,
    ) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            password_hash: Already-hashed password
            name: Optional display name

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash)
        return await self._add_and_refresh(db_user)

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def exists_by_username(self, username: str) -> bool:
        """Check whether a username is already registered."""
        return await self._check_exists_by_field("username", username)

    async def get_all_with_blogs(self) -> list[tuple[UserDB, list[BlogDB]]]:
        """
        Get every user together with the blogs they own.

        Users and their blogs are both returned in creation order.

        Returns:
            list[tuple[UserDB, list[BlogDB]]]: Users paired with their blogs
        """
        users = await self.session.execute(
            select(UserDB).order_by(UserDB.created_at, UserDB.uuid),
        )
        blogs = await self.session.execute(
            select(BlogDB).order_by(BlogDB.created_at, BlogDB.id),
        )

        blogs_by_owner: dict = {}
        for blog in blogs.scalars().all():
            blogs_by_owner.setdefault(blog.user_id, []).append(blog)

        return [(user, blogs_by_owner.get(user.uuid, [])) for user in users.scalars().all()]
