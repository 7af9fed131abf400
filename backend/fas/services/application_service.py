"""Application service enforcing scheme eligibility on every write."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from fas.core.errors import (
    ApplicantNotFoundError,
    ApplicationNotFoundError,
    NoUpdateFieldsError,
    SchemeNotEligibleError,
    SchemeNotFoundError,
)
from fas.models.domain.application import Application
from fas.repositories.applicant_repository import ApplicantRepository
from fas.repositories.application_repository import ApplicationRepository
from fas.repositories.scheme_repository import SchemeRepository
from fas.services.eligibility import EligibilityEngine

logger = logging.getLogger(__name__)


class ApplicationService:
    """
    Application service for managing scheme applications.

    Creates and updates only go through when the applicant currently meets
    every criterion of the scheme; deletes are never gated.
    """

    def __init__(self, db: AsyncSession, engine: Optional[EligibilityEngine] = None):
        """
        Initialize the application service.

        Args:
            db: Async database session
            engine: Eligibility engine, a fresh one when not given
        """
        self.db = db
        self.applications = ApplicationRepository(db)
        self.applicants = ApplicantRepository(db)
        self.schemes = SchemeRepository(db)
        self.engine = engine or EligibilityEngine()

    async def check_application_validity(
        self,
        applicant_id: UUID,
        scheme_id: UUID,
        today: Optional[date] = None,
    ) -> None:
        """
        Ensure an applicant may hold an application for a scheme.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist
            SchemeNotFoundError: If the scheme does not exist
            SchemeNotEligibleError: If the applicant fails any scheme criterion
        """
        applicant = await self.applicants.get_by_id(applicant_id)
        if applicant is None:
            raise ApplicantNotFoundError()

        scheme = await self.schemes.get_by_id_with_details(scheme_id)
        if scheme is None:
            raise SchemeNotFoundError()

        family = await self.applicants.get_family(applicant_id)

        if not self.engine.check_eligibility(scheme, applicant, family, today=today):
            logger.info(f"Applicant {applicant_id} is not eligible for scheme {scheme_id}")
            raise SchemeNotEligibleError()

    async def get_application(self, application_id: UUID) -> Application:
        """
        Retrieve an application by ID.

        Raises:
            ApplicationNotFoundError: If the application does not exist
        """
        application = await self.applications.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFoundError()
        return application

    async def list_applications(self) -> List[Application]:
        """Retrieve all applications in creation order."""
        return await self.applications.get_all()

    async def create_application(
        self,
        applicant_id: UUID,
        scheme_id: UUID,
        today: Optional[date] = None,
    ) -> Application:
        """
        Create an application after checking eligibility.

        Raises:
            ApplicantNotFoundError, SchemeNotFoundError, SchemeNotEligibleError
        """
        await self.check_application_validity(applicant_id, scheme_id, today=today)

        application = await self.applications.create(
            applicant_id=applicant_id, scheme_id=scheme_id
        )
        logger.info(
            f"Created application {application.id} for applicant {applicant_id} "
            f"on scheme {scheme_id}"
        )
        return application

    async def update_application(
        self,
        application_id: UUID,
        fields: Dict[str, Any],
        today: Optional[date] = None,
    ) -> Application:
        """
        Apply a partial update to an application after re-checking eligibility.

        Fields left out keep their current value; the resulting
        (applicant, scheme) pair must be eligible.

        Raises:
            NoUpdateFieldsError: If ``fields`` is empty
            ApplicationNotFoundError: If the application does not exist
            ApplicantNotFoundError, SchemeNotFoundError, SchemeNotEligibleError
        """
        if not fields:
            raise NoUpdateFieldsError()

        existing = await self.get_application(application_id)
        applicant_id = fields.get("applicant_id", existing.applicant_id)
        scheme_id = fields.get("scheme_id", existing.scheme_id)

        await self.check_application_validity(applicant_id, scheme_id, today=today)

        application = await self.applications.update(
            application_id, applicant_id=applicant_id, scheme_id=scheme_id
        )
        logger.info(f"Updated application {application_id}: {sorted(fields)}")
        return application

    async def delete_application(self, application_id: UUID) -> None:
        """
        Soft-delete an application without any eligibility check.

        Raises:
            ApplicationNotFoundError: If the application does not exist
        """
        if not await self.applications.soft_delete(application_id):
            raise ApplicationNotFoundError()
        logger.info(f"Deleted application {application_id}")
