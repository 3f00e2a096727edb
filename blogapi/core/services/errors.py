from typing import Optional


class ServiceError(Exception):
    """Base class for service errors.

    ``code`` is reported to GraphQL clients as ``extensions.code``.
    """

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class AuthenticationError(ServiceError):
    """Raised when an operation requires an identity the caller lacks."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class AuthorizationError(ServiceError):
    """Raised when a user is not authorized to perform an action."""

    code = "FORBIDDEN"

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class NotFoundError(ServiceError):
    """Raised when a resource is not found."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message += f": {resource_id}"
        super().__init__(message)


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    code = "BAD_USER_INPUT"


class ConflictError(ServiceError):
    """Raised when there is a conflict with existing data."""

    code = "CONFLICT"
