"""Unit tests for request identity resolution."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from blogapi.core.auth import RequestUser, get_request_user, resolve_request_user
from blogapi.core.security import TokenManager


@pytest.fixture
def manager():
    return TokenManager("test_secret")


def test_missing_header_is_anonymous(manager):
    assert resolve_request_user(None, manager) is None
    assert resolve_request_user("", manager) is None


def test_valid_bearer_token_yields_identity(manager):
    token = manager.issue("user-1", "user@example.com")

    user = resolve_request_user(f"Bearer {token}", manager)

    assert user == RequestUser(id="user-1", email="user@example.com")


def test_scheme_is_case_insensitive(manager):
    token = manager.issue("user-1", "user@example.com")

    assert resolve_request_user(f"bearer {token}", manager).id == "user-1"


@pytest.mark.parametrize("header", ["Bearer", "Bearer ", "Basic dXNlcjpwYXNz", "token"])
def test_non_bearer_headers_are_anonymous(manager, header):
    assert resolve_request_user(header, manager) is None


def test_invalid_token_falls_back_to_anonymous(manager):
    """Bad tokens are logged, never raised."""
    assert resolve_request_user("Bearer garbage", manager) is None


def test_expired_token_falls_back_to_anonymous(manager):
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = manager.issue("user-1", "user@example.com", now=issued)

    assert resolve_request_user(f"Bearer {token}", manager) is None


def test_request_user_defaults_to_anonymous():
    request = SimpleNamespace(state=SimpleNamespace())

    assert get_request_user(request) is None

    request.state.user = RequestUser(id="user-1", email="user@example.com")
    assert get_request_user(request).id == "user-1"
