"""Authentication schema models."""

from pydantic import BaseModel

from ._fields import EmailAddress


class LoginCredentials(BaseModel):
    """Schema for login credentials."""

    email: EmailAddress
    password: str
