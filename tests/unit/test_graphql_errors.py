"""Unit tests for service error translation."""

import pytest
from graphql import GraphQLError

from blogapi.core.services import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from blogapi.graphql.errors import graphql_errors, to_graphql_error


@pytest.mark.parametrize(
    "error,code,message",
    [
        (AuthenticationError(), "UNAUTHENTICATED", "Not authenticated"),
        (AuthorizationError(), "FORBIDDEN", "Not authorized"),
        (NotFoundError("Post"), "NOT_FOUND", "Post not found"),
        (ValidationError("Invalid input: email"), "BAD_USER_INPUT", "Invalid input: email"),
        (ConflictError("Email already registered"), "CONFLICT", "Email already registered"),
    ],
)
def test_service_errors_carry_their_code(error, code, message):
    converted = to_graphql_error(error)

    assert converted.message == message
    assert converted.extensions == {"code": code}


def test_graphql_errors_reraises_service_errors():
    with pytest.raises(GraphQLError) as exc_info:
        with graphql_errors():
            raise NotFoundError("Comment")

    assert exc_info.value.extensions["code"] == "NOT_FOUND"
    assert isinstance(exc_info.value.__cause__, NotFoundError)


def test_graphql_errors_leaves_other_exceptions_alone():
    with pytest.raises(KeyError):
        with graphql_errors():
            raise KeyError("boom")
