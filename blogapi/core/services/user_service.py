"""User service module."""

from typing import List, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas import UserUpdate
from ..auth import RequestUser
from ..database import User
from ..registry import register_service
from ..repository import CommentRepository, PostRepository, UserRepository
from .base import BaseService, changed_fields, require_user, validate_input
from .errors import ConflictError


@register_service
class UserService(BaseService[User]):
    """User service class."""

    def __init__(self, db: AsyncSession):
        """Initialize the service."""
        super().__init__(db)
        self.repository = UserRepository(db)
        self.posts = PostRepository(db)
        self.comments = CommentRepository(db)

    @classmethod
    def from_db(cls, db: AsyncSession, **kwargs) -> "UserService":
        """Create a new instance of the service."""
        return cls(db)

    async def list_users(self) -> List[User]:
        return await self.repository.get_all()

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self.repository.get_by_id(user_id)

    async def update_user(
        self,
        actor: Optional[RequestUser],
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Update the caller's own record.

        Args:
            actor: Identity of the caller
            name: New display name, ignored when empty
            email: New email, ignored when empty

        Returns:
            The updated user, or None if the caller's record no longer exists
        """
        actor = require_user(actor)
        values = changed_fields(validate_input(UserUpdate, name=name, email=email))

        async with self.unit_of_work():
            user = await self.repository.get_by_id(actor.id)
            if user is None:
                return None
            try:
                return await self.repository.update(user, values)
            except IntegrityError as e:
                raise ConflictError("Email already registered") from e

    async def delete_user(self, actor: Optional[RequestUser]) -> Optional[User]:
        """Delete the caller's own record together with its comments and posts.

        Dependents are removed before the user. Comments other users left on
        the deleted posts are kept.
        """
        actor = require_user(actor)

        async with self.unit_of_work():
            comments = await self.comments.delete_by_author(actor.id)
            posts = await self.posts.delete_by_author(actor.id)
            user = await self.repository.get_by_id(actor.id)
            if user is not None:
                await self.repository.delete(user)
            logger.info(
                f"Deleted user {actor.id} with {posts} posts and {comments} comments"
            )
            return user
