"""Translation of service errors into GraphQL errors."""

from contextlib import contextmanager
from typing import Iterator

from graphql import GraphQLError

from ..core.services.errors import ServiceError


def to_graphql_error(error: ServiceError) -> GraphQLError:
    return GraphQLError(error.message, extensions={"code": error.code})


@contextmanager
def graphql_errors() -> Iterator[None]:
    """Re-raise service errors as GraphQL errors with a machine-readable code."""
    try:
        yield
    except ServiceError as e:
        raise to_graphql_error(e) from e
