"""Base repository class for database operations."""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository class with common CRUD operations."""

    def __init__(self, db: AsyncSession, model: Type[ModelType]):
        """Initialize the repository.

        Args:
            db: Database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """Get a record by ID."""
        result = await self.db.execute(select(self.model).filter(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_by_field(self, field: str, value: Any) -> List[ModelType]:
        """Get records by field value."""
        result = await self.db.execute(
            select(self.model).filter(getattr(self.model, field) == value)
        )
        return list(result.scalars().all())

    async def get_all(self) -> List[ModelType]:
        """Get all records."""
        result = await self.db.execute(select(self.model))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Create a new record."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType, values: Dict[str, Any]) -> ModelType:
        """Apply field values to a record."""
        for key, value in values.items():
            setattr(obj, key, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> ModelType:
        """Delete a record and return it."""
        await self.db.delete(obj)
        await self.db.flush()
        return obj

    async def delete_by_field(self, field: str, value: Any) -> int:
        """Delete every record whose field equals value.

        Returns:
            Number of deleted records
        """
        result = await self.db.execute(
            delete(self.model).where(getattr(self.model, field) == value)
        )
        return result.rowcount
