"""GraphQL context definitions."""

from typing import Optional, Type, TypeVar

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from ..core.auth import RequestUser, get_request_user
from ..core.registry import get_service_factory
from ..core.security import TokenManager

T = TypeVar("T")


class Context(BaseContext):
    """GraphQL context built once per request.

    Carries the middleware-injected session and the caller's identity, which
    resolvers hand to services explicitly.
    """

    def __init__(self, request: Request):
        super().__init__()
        self.request = request

    @property
    def session(self) -> AsyncSession:
        """Access the database session from request state."""
        return self.request.state.db

    @property
    def user(self) -> Optional[RequestUser]:
        """Identity attached by the auth middleware, None for anonymous calls."""
        return get_request_user(self.request)

    @property
    def token_manager(self) -> TokenManager:
        return self.request.app.state.token_manager

    def service(self, service_class: Type[T]) -> T:
        """Create a service bound to this request's session."""
        factory = get_service_factory(service_class)
        return factory(self.session, token_manager=self.token_manager)


async def get_context(request: Request) -> Context:
    """Get GraphQL context using the middleware-injected session."""
    return Context(request=request)
