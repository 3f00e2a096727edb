"""User schema models."""

from pydantic import BaseModel, Field

from ._fields import EmailAddress, OptionalEmail, OptionalText


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailAddress = Field(..., description="Email address, unique per user")
    password: str = Field(..., min_length=1, description="Plaintext password")


class UserUpdate(BaseModel):
    """Schema for updating the caller's own user record."""

    name: OptionalText = None
    email: OptionalEmail = None
