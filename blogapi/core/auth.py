"""Authentication utilities."""

from typing import Optional

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param
from loguru import logger

from .security import InvalidTokenError, TokenClaims, TokenManager

# The identity attached to a request is exactly what a verified token carries.
RequestUser = TokenClaims


def _extract_token_from_header(auth_header: Optional[str]) -> Optional[str]:
    """Extract the credential from a ``Bearer <token>`` header value.

    Args:
        auth_header: Raw value of the Authorization header

    Returns:
        The token, or None when the header is absent or not a bearer header
    """
    scheme, token = get_authorization_scheme_param(auth_header)
    if scheme.lower() != "bearer" or not token:
        return None
    return token


def resolve_request_user(
    auth_header: Optional[str], token_manager: TokenManager
) -> Optional[RequestUser]:
    """Derive the request identity from the Authorization header.

    A missing header yields an anonymous request. An invalid token is logged
    and also yields an anonymous request; rejecting it is left to whichever
    operation requires authentication.

    Args:
        auth_header: Raw value of the Authorization header
        token_manager: Verifier for bearer tokens

    Returns:
        RequestUser for a valid token, None otherwise
    """
    token = _extract_token_from_header(auth_header)
    if not token:
        return None

    try:
        claims = token_manager.verify(token)
    except InvalidTokenError as e:
        logger.warning(f"Invalid token: {e}")
        return None

    logger.debug(f"Authenticated request for user: {claims.id}")
    return claims


def get_request_user(request: Request) -> Optional[RequestUser]:
    """Get the identity the auth middleware attached to the request."""
    return getattr(request.state, "user", None)
