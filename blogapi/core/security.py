from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from passlib.context import CryptContext

from .environment import AuthSettings

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hashed version."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a password hash."""
    return pwd_context.hash(password)


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be trusted."""


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    id: str
    email: str


class TokenManager:
    """Issues and verifies signed, time-limited bearer tokens.

    The signing secret is handed in at construction; there is no key rotation
    and no refresh mechanism. Expired tokens are rejected outright.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = DEFAULT_TOKEN_LIFETIME,
    ):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> "TokenManager":
        return cls(
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expires_delta=timedelta(minutes=settings.token_expiration_minutes),
        )

    def issue(self, subject: str, email: str, now: Optional[datetime] = None) -> str:
        """
        Create a signed token for a user.

        Args:
            subject: User id stored in the ``sub`` claim
            email: User email stored in the ``email`` claim
            now: Issuance time, defaults to the current UTC time

        Returns:
            Encoded JWT token string
        """
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(subject),
            "email": email,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and verify a token.

        Args:
            token: Encoded JWT token

        Returns:
            The identity claims of the token

        Raises:
            InvalidTokenError: If the signature is bad, the token expired or
                the identity claims are missing
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        subject = payload.get("sub")
        email = payload.get("email")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("Invalid token: 'sub' not found")
        if not isinstance(email, str) or not email:
            raise InvalidTokenError("Invalid token: 'email' not found")
        if "exp" not in payload:
            raise InvalidTokenError("Invalid token: 'exp' not found")

        return TokenClaims(id=subject, email=email)
