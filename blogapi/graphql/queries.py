"""GraphQL queries. All of them are public."""

from typing import List, Optional

import strawberry

from ..core.services import CommentService, PostService, UserService
from .context import Context
from .types import CommentType, PostType, UserType, to_comment, to_post, to_user


@strawberry.type
class Query:
    """GraphQL query type."""

    @strawberry.field
    async def get_all_users(
        self, info: strawberry.Info[Context, None]
    ) -> Optional[List[Optional[UserType]]]:
        users = await info.context.service(UserService).list_users()
        return [UserType.from_model(user) for user in users]

    @strawberry.field
    async def get_user_by_id(
        self, id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[UserType]:
        return to_user(await info.context.service(UserService).get_user(id))

    @strawberry.field
    async def get_all_posts(
        self, info: strawberry.Info[Context, None]
    ) -> Optional[List[Optional[PostType]]]:
        posts = await info.context.service(PostService).list_posts()
        return [PostType.from_model(post) for post in posts]

    @strawberry.field
    async def get_post_by_id(
        self, id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[PostType]:
        return to_post(await info.context.service(PostService).get_post(id))

    @strawberry.field
    async def get_posts_by_user_id(
        self, user_id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[List[Optional[PostType]]]:
        posts = await info.context.service(PostService).list_posts_by_author(user_id)
        return [PostType.from_model(post) for post in posts]

    @strawberry.field
    async def get_all_comments(
        self, info: strawberry.Info[Context, None]
    ) -> Optional[List[Optional[CommentType]]]:
        comments = await info.context.service(CommentService).list_comments()
        return [CommentType.from_model(comment) for comment in comments]

    @strawberry.field
    async def get_comment_by_id(
        self, id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[CommentType]:
        return to_comment(await info.context.service(CommentService).get_comment(id))
