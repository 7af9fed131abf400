"""Repositories for schemes, their benefits and their eligibility criteria."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fas.models.domain.scheme import Benefit, Scheme, SchemeCriteria
from fas.repositories.base import BaseRepository


class SchemeRepository(BaseRepository[Scheme]):
    """
    Repository for Scheme with eager loading of criteria and benefits.

    Only non-deleted criteria and benefits are loaded into the collections,
    so callers can hand a scheme straight to the eligibility engine.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the scheme repository.

        Args:
            db: Async database session
        """
        super().__init__(Scheme, db)

    def _select_with_details(self):
        return (
            self._select_active()
            .options(
                selectinload(Scheme.criteria.and_(SchemeCriteria.deleted_at.is_(None))),
                selectinload(Scheme.benefits.and_(Benefit.deleted_at.is_(None))),
            )
            .execution_options(populate_existing=True)
        )

    async def get_by_id_with_details(self, id: UUID) -> Optional[Scheme]:
        """
        Retrieve a scheme by ID with criteria and benefits loaded.

        Args:
            id: The UUID of the scheme

        Returns:
            The scheme if found, None otherwise
        """
        stmt = self._select_with_details().where(Scheme.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_with_details(self) -> List[Scheme]:
        """
        Retrieve every non-deleted scheme with criteria and benefits loaded.

        Returns:
            List of schemes in creation order
        """
        stmt = self._select_with_details().order_by(Scheme.created_at)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


class BenefitRepository(BaseRepository[Benefit]):
    """Repository for scheme benefits."""

    def __init__(self, db: AsyncSession):
        super().__init__(Benefit, db)


class SchemeCriteriaRepository(BaseRepository[SchemeCriteria]):
    """Repository for scheme eligibility criteria."""

    def __init__(self, db: AsyncSession):
        super().__init__(SchemeCriteria, db)
