"""GraphQL type definitions.

Relationship fields look up their target once per parent object; lists of
parents are not batched.
"""

from typing import List, Optional

import strawberry

from ..core.database import Comment, Post, User
from ..core.services import CommentService, PostService, UserService
from .context import Context


@strawberry.type(name="User")
class UserType:
    """A registered user. The password hash is never exposed."""

    id: strawberry.ID
    name: str
    email: str

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(id=strawberry.ID(user.id), name=user.name, email=user.email)

    @strawberry.field
    async def posts(
        self, info: strawberry.Info[Context, None]
    ) -> Optional[List[Optional["PostType"]]]:
        """Posts written by this user."""
        posts = await info.context.service(PostService).list_posts_by_author(self.id)
        return [PostType.from_model(post) for post in posts]


@strawberry.type(name="Post")
class PostType:
    """A blog post."""

    id: strawberry.ID
    title: str
    content: str
    author_id: strawberry.Private[str]

    @classmethod
    def from_model(cls, post: Post) -> "PostType":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            content=post.content,
            author_id=post.author_id,
        )

    @strawberry.field
    async def author(self, info: strawberry.Info[Context, None]) -> UserType:
        user = await info.context.service(UserService).get_user(self.author_id)
        return to_user(user)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info[Context, None]
    ) -> Optional[List[Optional["CommentType"]]]:
        comments = await info.context.service(CommentService).list_comments_by_post(
            self.id
        )
        return [CommentType.from_model(comment) for comment in comments]


@strawberry.type(name="Comment")
class CommentType:
    """A comment left on a post."""

    id: strawberry.ID
    text: str
    author_id: strawberry.Private[str]
    post_id: strawberry.Private[str]

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        return cls(
            id=strawberry.ID(comment.id),
            text=comment.text,
            author_id=comment.author_id,
            post_id=comment.post_id,
        )

    @strawberry.field
    async def author(self, info: strawberry.Info[Context, None]) -> UserType:
        user = await info.context.service(UserService).get_user(self.author_id)
        return to_user(user)

    @strawberry.field
    async def post(self, info: strawberry.Info[Context, None]) -> PostType:
        post = await info.context.service(PostService).get_post(self.post_id)
        return to_post(post)


@strawberry.type(name="AuthPayload")
class AuthPayload:
    """Token issued by register or login, with the user it identifies."""

    token: str
    user: UserType


def to_user(user: Optional[User]) -> Optional[UserType]:
    return UserType.from_model(user) if user else None


def to_post(post: Optional[Post]) -> Optional[PostType]:
    return PostType.from_model(post) if post else None


def to_comment(comment: Optional[Comment]) -> Optional[CommentType]:
    return CommentType.from_model(comment) if comment else None
