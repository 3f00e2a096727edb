"""Post schema models."""

from pydantic import BaseModel, Field

from ._fields import OptionalText


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")


class PostUpdate(BaseModel):
    """Schema for updating an existing post."""

    title: OptionalText = None
    content: OptionalText = None
