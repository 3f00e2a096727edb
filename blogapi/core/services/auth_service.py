"""Registration and login."""

from dataclasses import dataclass

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas import LoginCredentials, UserCreate
from ..database import User
from ..registry import register_service
from ..repository import UserRepository
from ..security import TokenManager, verify_password
from .base import BaseService, validate_input
from .errors import AuthenticationError, ConflictError

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    """A freshly issued token and the user it identifies."""

    token: str
    user: User


@register_service
class AuthService(BaseService[User]):
    """Issues tokens for new and returning users."""

    def __init__(self, db: AsyncSession, token_manager: TokenManager):
        super().__init__(db)
        self.repository = UserRepository(db)
        self.token_manager = token_manager

    @classmethod
    def from_db(cls, db: AsyncSession, **kwargs) -> "AuthService":
        return cls(db, token_manager=kwargs["token_manager"])

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """Create a user and log them in.

        Args:
            name: Display name
            email: Email address, must not be registered yet
            password: Plaintext password, stored hashed

        Returns:
            AuthResult with a token for the new user

        Raises:
            ValidationError: If an input is empty or the email is malformed
            ConflictError: If the email is already registered
        """
        data = validate_input(UserCreate, name=name, email=email, password=password)

        async with self.unit_of_work():
            try:
                user = await self.repository.create(
                    User(name=data.name, email=data.email, password=data.password)
                )
            except IntegrityError as e:
                raise ConflictError("Email already registered") from e

        logger.info(f"Registered user {user.id}")
        return AuthResult(token=self._issue(user), user=user)

    async def login(self, email: str, password: str) -> AuthResult:
        """Exchange credentials for a token.

        An unknown email and a wrong password fail with the same error so the
        response does not reveal which check failed.

        Emails are matched exactly as they were registered.

        Raises:
            ValidationError: If the email is malformed
            AuthenticationError: If the credentials do not match a user
        """
        credentials = validate_input(LoginCredentials, email=email, password=password)
        user = await self.repository.get_by_email(credentials.email)

        if not user or not verify_password(credentials.password, user.password):
            logger.warning(f"Failed authentication attempt for email: {email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.debug(f"User authenticated: {user.id}")
        return AuthResult(token=self._issue(user), user=user)

    def _issue(self, user: User) -> str:
        return self.token_manager.issue(subject=user.id, email=user.email)
