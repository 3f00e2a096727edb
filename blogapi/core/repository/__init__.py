"""Repository package for database operations."""

from .base import BaseRepository
from .comment_repository import CommentRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "PostRepository",
    "UserRepository",
]
