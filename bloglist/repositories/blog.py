"""Blog repository for database operations."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Reads join the owning user so that responses can embed the owner's
    public fields without a second round trip.
    """

    model = BlogDB

    def _with_owner(self):  # noqa: ANN202
        return select(BlogDB, UserDB).join(
            UserDB,
            cast(ColumnElement[bool], BlogDB.user_id == UserDB.uuid),
        )

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Validated blog data
            user_id: UUID of the owning user

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        created = await self._add_and_refresh(db_blog)
        logger.info(f"Blog {created.id} created by user {user_id}")
        return created

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB]]:
        """
        Get all blogs with their owners, oldest first.

        Returns:
            list[tuple[BlogDB, UserDB]]: Blog rows paired with owner rows
        """
        result = await self.session.execute(
            self._with_owner().order_by(BlogDB.created_at, BlogDB.id),
        )
        return [(blog, owner) for blog, owner in result.all()]

    async def get_with_owner(self, blog_id: UUID) -> tuple[BlogDB, UserDB] | None:
        """
        Get a single blog with its owner.

        Args:
            blog_id: Blog UUID

        Returns:
            tuple[BlogDB, UserDB] | None: Blog and owner if found, None otherwise
        """
        result = await self.session.execute(
            self._with_owner().where(cast(ColumnElement[bool], BlogDB.id == blog_id)),
        )
        row = result.first()
        if row is None:
            return None
        blog, owner = row
        return blog, owner

    async def update(self, blog: BlogDB, blog_update: BlogUpdate) -> BlogDB:
        """
        Apply a partial update to a loaded blog.

        Args:
            blog: Blog row to modify
            blog_update: Fields to change; unset fields are left alone

        Returns:
            BlogDB: Updated blog
        """
        update_data = blog_update.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in update_data.items():
            setattr(blog, key, value)
        blog.updated_at = datetime.now(tz=UTC)
        return await self._add_and_refresh(blog)
