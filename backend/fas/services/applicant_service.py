"""Applicant service for applicant CRUD and family relationships."""

import logging
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from fas.core.enums import RelationshipType
from fas.core.errors import (
    ApplicantNotFoundError,
    InvalidRelationshipError,
    NoUpdateFieldsError,
    RelationshipNotFoundError,
)
from fas.db.base import utcnow
from fas.models.domain.applicant import Applicant, FamilyRelationship
from fas.repositories.applicant_repository import ApplicantRepository

logger = logging.getLogger(__name__)


class ApplicantService:
    """
    Applicant service for managing applicants and their families.

    Lookup misses are raised as ApplicantNotFoundError so the API layer never
    has to inspect a None.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the applicant service.

        Args:
            db: Async database session
        """
        self.db = db
        self.applicants = ApplicantRepository(db)

    async def get_applicant(self, applicant_id: UUID) -> Applicant:
        """
        Retrieve an applicant by ID.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist or is deleted
        """
        applicant = await self.applicants.get_by_id(applicant_id)
        if applicant is None:
            raise ApplicantNotFoundError()
        return applicant

    async def list_applicants(self) -> List[Applicant]:
        """Retrieve all applicants in creation order."""
        return await self.applicants.get_all()

    async def create_applicant(self, **fields: Any) -> Applicant:
        """
        Create a new applicant.

        Args:
            **fields: name, employment_status, marital_status, sex, date_of_birth

        Returns:
            Created applicant
        """
        applicant = await self.applicants.create(**fields)
        logger.info(f"Created applicant {applicant.id}")
        return applicant

    async def update_applicant(self, applicant_id: UUID, fields: Dict[str, Any]) -> Applicant:
        """
        Apply a partial update to an applicant.

        Args:
            applicant_id: UUID of the applicant
            fields: Only the fields to change

        Raises:
            NoUpdateFieldsError: If ``fields`` is empty
            ApplicantNotFoundError: If the applicant does not exist
        """
        if not fields:
            raise NoUpdateFieldsError()

        applicant = await self.applicants.update(applicant_id, **fields)
        if applicant is None:
            raise ApplicantNotFoundError()

        logger.info(f"Updated applicant {applicant_id}: {sorted(fields)}")
        return applicant

    async def delete_applicant(self, applicant_id: UUID) -> None:
        """
        Soft-delete an applicant.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist
        """
        if not await self.applicants.soft_delete(applicant_id):
            raise ApplicantNotFoundError()
        logger.info(f"Deleted applicant {applicant_id}")

    # ===== Family Relationships =====

    async def list_family(self, applicant_id: UUID) -> List[FamilyRelationship]:
        """Retrieve an applicant's active relationships."""
        await self.get_applicant(applicant_id)
        return await self.applicants.list_relationships(applicant_id)

    async def add_family_member(
        self,
        applicant_id: UUID,
        related_applicant_id: UUID,
        relationship_type: RelationshipType,
    ) -> FamilyRelationship:
        """
        Record that ``related_applicant_id`` is the ``relationship_type`` of
        ``applicant_id`` (e.g. their child).

        Raises:
            InvalidRelationshipError: If both IDs are the same applicant
            ApplicantNotFoundError: If either applicant does not exist
        """
        if applicant_id == related_applicant_id:
            raise InvalidRelationshipError()

        await self.get_applicant(applicant_id)
        await self.get_applicant(related_applicant_id)

        relationship = await self.applicants.add_relationship(
            applicant_id, related_applicant_id, relationship_type
        )
        logger.info(
            f"Added {relationship_type.value} {related_applicant_id} to applicant {applicant_id}"
        )
        return relationship

    async def remove_family_member(self, applicant_id: UUID, relationship_id: UUID) -> None:
        """
        Soft-delete one of an applicant's relationships.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist
            RelationshipNotFoundError: If the relationship does not belong to them
        """
        await self.get_applicant(applicant_id)

        relationship = await self.applicants.get_relationship(applicant_id, relationship_id)
        if relationship is None:
            raise RelationshipNotFoundError()

        relationship.deleted_at = utcnow()
        await self.db.flush()
        logger.info(f"Removed relationship {relationship_id} from applicant {applicant_id}")
