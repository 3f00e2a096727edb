"""GraphQL schema for users, posts and comments."""

from .graphql import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
