"""GraphQL mutations.

Every mutation except ``register`` and ``login`` requires a bearer token;
updates and deletes of posts and comments additionally require ownership.
"""

from typing import Optional

import strawberry

from ..core.services import AuthService, CommentService, PostService, UserService
from ..core.services.auth_service import AuthResult
from .context import Context
from .errors import graphql_errors
from .types import AuthPayload, CommentType, PostType, UserType, to_user


def _auth_payload(result: AuthResult) -> AuthPayload:
    return AuthPayload(token=result.token, user=UserType.from_model(result.user))


@strawberry.type
class Mutation:
    """GraphQL mutations."""

    @strawberry.mutation
    async def register(
        self, name: str, email: str, password: str, info: strawberry.Info[Context, None]
    ) -> Optional[AuthPayload]:
        """Create an account and return a token for it."""
        with graphql_errors():
            result = await info.context.service(AuthService).register(
                name, email, password
            )
        return _auth_payload(result)

    @strawberry.mutation
    async def login(
        self, email: str, password: str, info: strawberry.Info[Context, None]
    ) -> Optional[AuthPayload]:
        """Login mutation."""
        with graphql_errors():
            result = await info.context.service(AuthService).login(email, password)
        return _auth_payload(result)

    @strawberry.mutation
    async def update_user(
        self,
        info: strawberry.Info[Context, None],
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[UserType]:
        """Update the caller's own name and/or email."""
        with graphql_errors():
            user = await info.context.service(UserService).update_user(
                info.context.user, name=name, email=email
            )
        return to_user(user)

    @strawberry.mutation
    async def delete_user(
        self, info: strawberry.Info[Context, None]
    ) -> Optional[UserType]:
        """Delete the caller's account, posts and comments."""
        with graphql_errors():
            user = await info.context.service(UserService).delete_user(
                info.context.user
            )
        return to_user(user)

    @strawberry.mutation
    async def add_post(
        self, title: str, content: str, info: strawberry.Info[Context, None]
    ) -> Optional[PostType]:
        with graphql_errors():
            post = await info.context.service(PostService).create_post(
                info.context.user, title, content
            )
        return PostType.from_model(post)

    @strawberry.mutation
    async def update_post(
        self,
        id: strawberry.ID,
        info: strawberry.Info[Context, None],
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[PostType]:
        with graphql_errors():
            post = await info.context.service(PostService).update_post(
                info.context.user, id, title=title, content=content
            )
        return PostType.from_model(post)

    @strawberry.mutation
    async def delete_post(
        self, id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[PostType]:
        """Delete one of the caller's posts and its comments."""
        with graphql_errors():
            post = await info.context.service(PostService).delete_post(
                info.context.user, id
            )
        return PostType.from_model(post)

    @strawberry.mutation
    async def add_comment(
        self, text: str, post_id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[CommentType]:
        with graphql_errors():
            comment = await info.context.service(CommentService).create_comment(
                info.context.user, text, post_id
            )
        return CommentType.from_model(comment)

    @strawberry.mutation
    async def update_comment(
        self,
        id: strawberry.ID,
        info: strawberry.Info[Context, None],
        text: Optional[str] = None,
    ) -> Optional[CommentType]:
        with graphql_errors():
            comment = await info.context.service(CommentService).update_comment(
                info.context.user, id, text=text
            )
        return CommentType.from_model(comment)

    @strawberry.mutation
    async def delete_comment(
        self, id: strawberry.ID, info: strawberry.Info[Context, None]
    ) -> Optional[CommentType]:
        with graphql_errors():
            comment = await info.context.service(CommentService).delete_comment(
                info.context.user, id
            )
        return CommentType.from_model(comment)
