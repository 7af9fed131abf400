"""Generic soft-delete aware repository shared by every entity."""

from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fas.db.base import BaseModel, utcnow

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    CRUD over one model where deleted rows are invisible.

    Reads filter on ``deleted_at IS NULL``; ``soft_delete`` stamps
    ``deleted_at`` rather than issuing a DELETE. Writes only flush, the
    request-scoped session commits.

    Type Parameters:
        ModelType: Mapped class derived from ``fas.db.base.BaseModel``
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    def _select_active(self) -> Select:
        return select(self.model).where(self.model.deleted_at.is_(None))

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a row and return it with server-side defaults populated.

        Args:
            **kwargs: Column values
        """
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """Return the live row with this id, or None if missing or deleted."""
        result = await self.db.execute(self._select_active().where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[Any] = None,
    ) -> List[ModelType]:
        """
        List live rows, oldest first unless ``order_by`` says otherwise.

        Args:
            skip: Rows to skip
            limit: Maximum rows to return, unbounded when None
            order_by: Ordering clause replacing ``created_at``
        """
        stmt = self._select_active().order_by(
            order_by if order_by is not None else self.model.created_at
        )
        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, id: UUID, **kwargs: Any) -> Optional[ModelType]:
        """
        Set the given attributes on a live row.

        Goes through the ORM instance instead of a bulk UPDATE so ``updated_at``
        is bumped and objects already in the session stay consistent.

        Returns:
            The refreshed row, or None if it does not exist
        """
        instance = await self.get_by_id(id)
        if instance is None:
            return None

        for key, value in kwargs.items():
            setattr(instance, key, value)

        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def soft_delete(self, id: UUID) -> bool:
        """Stamp ``deleted_at``; False when the row is missing or already deleted."""
        instance = await self.get_by_id(id)
        if instance is None:
            return False

        instance.deleted_at = utcnow()
        await self.db.flush()
        return True

    async def exists(self, id: UUID) -> bool:
        stmt = select(self.model.id).where(
            self.model.id == id, self.model.deleted_at.is_(None)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        """Number of live rows; deleted rows are not counted."""
        stmt = select(func.count(self.model.id)).where(self.model.deleted_at.is_(None))
        result = await self.db.execute(stmt)
        return result.scalar_one()
