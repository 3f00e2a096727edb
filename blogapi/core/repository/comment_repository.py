"""Repository for managing comments."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Comment
from .base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for managing comments."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Comment)

    async def get_by_post(self, post_id: str) -> List[Comment]:
        return await self.get_by_field("post_id", post_id)

    async def delete_by_post(self, post_id: str) -> int:
        return await self.delete_by_field("post_id", post_id)

    async def delete_by_author(self, author_id: str) -> int:
        return await self.delete_by_field("author_id", author_id)
