"""Comment schema models."""

from pydantic import BaseModel, Field

from ._fields import OptionalText


class CommentCreate(BaseModel):
    """Schema for creating a new comment."""

    text: str = Field(..., min_length=1, description="Comment text")
    post_id: str = Field(..., min_length=1, description="ID of the commented post")


class CommentUpdate(BaseModel):
    """Schema for updating an existing comment."""

    text: OptionalText = None
