"""Base repository class with the read and append operations the poller needs."""

from typing import Any, Generic, List, Type, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from ubp_poller.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common operations for all models.

    Tables are append-only from this program's point of view, so there is
    no update or delete here.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def create(self, **kwargs) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def get_all(self) -> List[ModelType]:
        """Get all rows in store iteration order."""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def exists(self, **filters: Any) -> bool:
        """Return True if at least one row matches the given field values."""
        query = select(exists().where(*self._conditions(filters)))
        result = await self.session.execute(query)
        return bool(result.scalar())

    def _conditions(self, filters: dict) -> list:
        return [getattr(self.model, name) == value for name, value in filters.items()]
