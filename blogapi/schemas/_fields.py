from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BeforeValidator
from pydantic.networks import validate_email


def blank_to_none(value: Any) -> Any:
    """Treat empty strings in partial updates as "not provided"."""
    if isinstance(value, str) and not value:
        return None
    return value


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the value exactly as submitted."""
    _, address = validate_email(value)
    # validate_email also accepts "Name <addr>"; only a bare address is allowed.
    if address.lower() != value.lower():
        raise ValueError("value is not a valid email address")
    return value


EmailAddress = Annotated[str, AfterValidator(check_email)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
OptionalEmail = Annotated[Optional[EmailAddress], BeforeValidator(blank_to_none)]
