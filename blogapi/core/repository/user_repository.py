"""Repository for managing users."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import User
from ..security import get_password_hash
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for managing users."""

    def __init__(self, db: AsyncSession):
        """Initialize the repository with User model."""
        super().__init__(db, User)

    async def create(self, obj: User) -> User:
        """Insert a user, storing only the hash of its plaintext password."""
        obj.password = get_password_hash(obj.password)
        return await super().create(obj)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email.

        Args:
            email: The email to look up

        Returns:
            The user if found, None otherwise
        """
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
