"""Services implementing the blog operations."""

from .auth_service import AuthResult, AuthService
from .comment_service import CommentService
from .errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthResult",
    "AuthService",
    "AuthenticationError",
    "AuthorizationError",
    "CommentService",
    "ConflictError",
    "NotFoundError",
    "PostService",
    "ServiceError",
    "UserService",
    "ValidationError",
]
