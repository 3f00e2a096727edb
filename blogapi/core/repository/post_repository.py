"""Repository for managing posts."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Post
from .base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for managing posts."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Post)

    async def get_by_author(self, author_id: str) -> List[Post]:
        return await self.get_by_field("author_id", author_id)

    async def delete_by_author(self, author_id: str) -> int:
        return await self.delete_by_field("author_id", author_id)
