"""Comment service module."""

from typing import List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas import CommentCreate, CommentUpdate
from ..auth import RequestUser
from ..database import Comment
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
class CommentService(BaseService[Comment]):
    """Comment service class."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.repository = CommentRepository(db)
        self.posts = PostRepository(db)

    @classmethod
    def from_db(cls, db: AsyncSession, **kwargs) -> "CommentService":
        return cls(db)

    async def list_comments(self) -> List[Comment]:
        return await self.repository.get_all()

    async def get_comment(self, comment_id: str) -> Optional[Comment]:
        return await self.repository.get_by_id(comment_id)

    async def list_comments_by_post(self, post_id: str) -> List[Comment]:
        return await self.repository.get_by_post(post_id)

    async def create_comment(
        self, actor: Optional[RequestUser], text: str, post_id: str
    ) -> Comment:
        """Comment on an existing post as the caller."""
        actor = require_user(actor)
        data = validate_input(CommentCreate, text=text, post_id=post_id)

        async with self.unit_of_work():
            post = await self.posts.get_by_id(data.post_id)
            if post is None:
                raise NotFoundError("Post")
            comment = await self.repository.create(
                Comment(text=data.text, author_id=actor.id, post_id=post.id)
            )
            logger.info(f"Comment {comment.id} added to post {post.id} by {actor.id}")
            return comment

    async def update_comment(
        self, actor: Optional[RequestUser], comment_id: str, text: Optional[str] = None
    ) -> Comment:
        actor = require_user(actor)
        values = changed_fields(validate_input(CommentUpdate, text=text))

        async with self.unit_of_work():
            comment = await self._get_owned_comment(actor, comment_id)
            return await self.repository.update(comment, values)

    async def delete_comment(
        self, actor: Optional[RequestUser], comment_id: str
    ) -> Comment:
        actor = require_user(actor)

        async with self.unit_of_work():
            comment = await self._get_owned_comment(actor, comment_id)
            return await self.repository.delete(comment)

    async def _get_owned_comment(self, actor: RequestUser, comment_id: str) -> Comment:
        comment = await self.repository.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment")
        ensure_owner(comment.author_id, actor)
        return comment
