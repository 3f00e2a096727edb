"""Post service module."""

from typing import List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas import PostCreate, PostUpdate
from ..auth import RequestUser
from ..database import Post
from ..registry import register_service
from ..repository import CommentRepository, PostRepository
from .base import (
    BaseService,
    changed_fields,
    ensure_owner,
    require_user,
    validate_input,
)
from .errors import NotFoundError


@register_service
class PostService(BaseService[Post]):
    """Post service class."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.repository = PostRepository(db)
        self.comments = CommentRepository(db)

    @classmethod
    def from_db(cls, db: AsyncSession, **kwargs) -> "PostService":
        return cls(db)

    async def list_posts(self) -> List[Post]:
        return await self.repository.get_all()

    async def get_post(self, post_id: str) -> Optional[Post]:
        return await self.repository.get_by_id(post_id)

    async def list_posts_by_author(self, author_id: str) -> List[Post]:
        return await self.repository.get_by_author(author_id)

    async def create_post(
        self, actor: Optional[RequestUser], title: str, content: str
    ) -> Post:
        actor = require_user(actor)
        data = validate_input(PostCreate, title=title, content=content)

        async with self.unit_of_work():
            post = await self.repository.create(
                Post(title=data.title, content=data.content, author_id=actor.id)
            )
            logger.info(f"Post {post.id} created by {actor.id}")
            return post

    async def update_post(
        self,
        actor: Optional[RequestUser],
        post_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Post:
        actor = require_user(actor)
        values = changed_fields(validate_input(PostUpdate, title=title, content=content))

        async with self.unit_of_work():
            post = await self._get_owned_post(actor, post_id)
            return await self.repository.update(post, values)

    async def delete_post(self, actor: Optional[RequestUser], post_id: str) -> Post:
        """Delete one of the caller's posts after removing its comments."""
        actor = require_user(actor)

        async with self.unit_of_work():
            post = await self._get_owned_post(actor, post_id)
            await self.comments.delete_by_post(post.id)
            await self.repository.delete(post)
            logger.info(f"Post {post.id} deleted by {actor.id}")
            return post

    async def _get_owned_post(self, actor: RequestUser, post_id: str) -> Post:
        post = await self.repository.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post")
        ensure_owner(post.author_id, actor)
        return post
