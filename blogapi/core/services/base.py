from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import RequestUser
from .errors import AuthenticationError, AuthorizationError, ValidationError

T = TypeVar("T")
S = TypeVar("S", bound=BaseModel)


class BaseService(ABC, Generic[T]):
    """Base class for all services."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @classmethod
    @abstractmethod
    def from_db(cls, db: AsyncSession, **kwargs: Any) -> "BaseService":
        """Factory method to create service instance."""

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[None]:
        """Commit everything written inside the block, or nothing at all."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise


def require_user(actor: Optional[RequestUser]) -> RequestUser:
    """Return the acting identity or fail when the caller is anonymous."""
    if actor is None:
        raise AuthenticationError()
    return actor


def ensure_owner(author_id: str, actor: RequestUser) -> None:
    """Fail unless the acting identity is the stored author."""
    if str(author_id) != actor.id:
        raise AuthorizationError()


def validate_input(schema: Type[S], **data: Any) -> S:
    """Build an input schema, mapping pydantic errors to service errors."""
    try:
        return schema(**data)
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid input: {details}") from e


def changed_fields(update: BaseModel) -> Dict[str, Any]:
    """Fields of a partial update that were actually provided."""
    return update.model_dump(exclude_none=True)
