"""Repository for applicant and family relationship data access."""

from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, selectinload

from fas.core.enums import RelationshipType
from fas.models.domain.applicant import Applicant, FamilyRelationship
from fas.repositories.base import BaseRepository


class ApplicantRepository(BaseRepository[Applicant]):
    """
    Repository for Applicant with family relationship queries.

    Relationships whose related applicant has been soft-deleted are treated as
    absent everywhere.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the applicant repository.

        Args:
            db: Async database session
        """
        super().__init__(Applicant, db)

    def _select_relationships(self, applicant_id: UUID):
        related = aliased(Applicant)
        return (
            select(FamilyRelationship)
            .join(related, FamilyRelationship.applicant_b_id == related.id)
            .where(
                FamilyRelationship.applicant_a_id == applicant_id,
                FamilyRelationship.deleted_at.is_(None),
                related.deleted_at.is_(None),
            )
        )

    async def get_family(self, applicant_id: UUID) -> Dict[RelationshipType, Applicant]:
        """
        Retrieve an applicant's family keyed by relationship type.

        When several relatives share a type, the most recently added one is
        kept; eligibility only looks at which types are present.

        Args:
            applicant_id: UUID of applicant A

        Returns:
            Mapping of relationship type to the related applicant B
        """
        relationships = await self.list_relationships(applicant_id)
        return {
            relationship.relationship_type: relationship.related_applicant
            for relationship in relationships
        }

    async def list_relationships(self, applicant_id: UUID) -> List[FamilyRelationship]:
        """
        Retrieve all active relationships from an applicant, oldest first.

        Args:
            applicant_id: UUID of applicant A

        Returns:
            Relationships with the related applicant eagerly loaded
        """
        stmt = (
            self._select_relationships(applicant_id)
            .options(selectinload(FamilyRelationship.related_applicant))
            .order_by(FamilyRelationship.created_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_relationship(
        self, applicant_id: UUID, relationship_id: UUID
    ) -> Optional[FamilyRelationship]:
        """
        Retrieve one active relationship belonging to an applicant.

        Args:
            applicant_id: UUID of applicant A
            relationship_id: UUID of the relationship

        Returns:
            The relationship if found, None otherwise
        """
        stmt = (
            self._select_relationships(applicant_id)
            .where(FamilyRelationship.id == relationship_id)
            .options(selectinload(FamilyRelationship.related_applicant))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def add_relationship(
        self,
        applicant_id: UUID,
        related_applicant_id: UUID,
        relationship_type: RelationshipType,
    ) -> FamilyRelationship:
        """
        Create a directed relationship from applicant A to applicant B.

        Args:
            applicant_id: UUID of applicant A
            related_applicant_id: UUID of applicant B
            relationship_type: How B relates to A

        Returns:
            The created relationship
        """
        relationship = FamilyRelationship(
            applicant_a_id=applicant_id,
            applicant_b_id=related_applicant_id,
            relationship_type=relationship_type,
        )
        self.db.add(relationship)
        await self.db.flush()
        return await self.get_relationship(applicant_id, relationship.id)
