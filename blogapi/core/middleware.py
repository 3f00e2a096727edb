"""FastAPI middleware."""

import time
from typing import Optional

from fastapi import Request, Response
from graphql import GraphQLError, get_operation_ast, parse
from prometheus_client import Counter, Histogram
from sqlalchemy.ext.asyncio import async_sessionmaker
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from .auth import resolve_request_user
from .database import get_session_maker

# GraphQL requests are labelled "graphql:<operation name>", everything else by path.
REQUEST_COUNT = Counter(
    "blogapi_requests_total",
    "Requests handled, by route or GraphQL operation",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "blogapi_request_duration_seconds",
    "Request latency in seconds, by route or GraphQL operation",
    ["method", "endpoint"],
)

GRAPHQL_PATH = "/graphql"


class DatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to inject database session into request state."""

    def __init__(self, app: ASGIApp, session_maker: Optional[async_sessionmaker] = None):
        super().__init__(app)
        self._session_maker = session_maker

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Inject database session into request state."""
        session_maker = self._session_maker or get_session_maker()
        async with session_maker() as session:
            request.state.db = session
            try:
                response = await call_next(request)
                await session.commit()
                return response
            except Exception:
                await session.rollback()
                raise


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches the caller's identity to the request.

    Never rejects a request: a missing or invalid token leaves
    ``request.state.user`` set to None.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Handle authentication."""
        token_manager = request.app.state.token_manager
        request.state.user = resolve_request_user(
            request.headers.get("authorization"), token_manager
        )
        return await call_next(request)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Records request counts and latency per route or GraphQL operation."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        endpoint = await operation_label(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start_time

        REQUEST_COUNT.labels(
            method=request.method, endpoint=endpoint, status=response.status_code
        ).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(
            elapsed
        )
        return response


async def operation_label(request: Request) -> str:
    """Metric label for a request.

    Every GraphQL POST shares one path, so it is labelled by the
    ``operationName`` the client sent, or the name given in the document.
    """
    path = request.url.path
    if request.method != "POST" or path.rstrip("/") != GRAPHQL_PATH:
        return path

    try:
        payload = await request.json()
    except ValueError:
        return "graphql:invalid"
    if not isinstance(payload, dict):
        return "graphql:invalid"

    name = payload.get("operationName")
    if not name and isinstance(payload.get("query"), str):
        try:
            operation = get_operation_ast(parse(payload["query"]))
        except GraphQLError:
            return "graphql:invalid"
        if operation and operation.name:
            name = operation.name.value
    return f"graphql:{name or 'anonymous'}"
