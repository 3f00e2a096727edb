"""Input schemas validated before reaching persistence."""

from .auth import LoginCredentials
from .comment import CommentCreate, CommentUpdate
from .post import PostCreate, PostUpdate
from .user import UserCreate, UserUpdate

__all__ = [
    "CommentCreate",
    "CommentUpdate",
    "LoginCredentials",
    "PostCreate",
    "PostUpdate",
    "UserCreate",
    "UserUpdate",
]
