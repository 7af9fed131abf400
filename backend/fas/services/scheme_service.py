"""Scheme service for scheme, benefit and criteria management."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from fas.core.errors import (
    ApplicantNotFoundError,
    BenefitNotFoundError,
    NoUpdateFieldsError,
    SchemeCriteriaNotFoundError,
    SchemeNotFoundError,
)
from fas.models.domain.scheme import Benefit, Scheme, SchemeCriteria
from fas.repositories.applicant_repository import ApplicantRepository
from fas.repositories.scheme_repository import (
    BenefitRepository,
    SchemeCriteriaRepository,
    SchemeRepository,
)
from fas.services.eligibility import EligibilityEngine, validate_criteria

logger = logging.getLogger(__name__)


class SchemeService:
    """
    Scheme service for managing schemes and their benefits and criteria.

    Criteria are validated before they are written, and schemes are always
    returned with their criteria and benefits loaded.
    """

    def __init__(self, db: AsyncSession, engine: Optional[EligibilityEngine] = None):
        """
        Initialize the scheme service.

        Args:
            db: Async database session
            engine: Eligibility engine, a fresh one when not given
        """
        self.db = db
        self.schemes = SchemeRepository(db)
        self.benefits = BenefitRepository(db)
        self.criteria = SchemeCriteriaRepository(db)
        self.applicants = ApplicantRepository(db)
        self.engine = engine or EligibilityEngine()

    # ===== Scheme CRUD Operations =====

    async def get_scheme(self, scheme_id: UUID) -> Scheme:
        """
        Retrieve a scheme with criteria and benefits.

        Raises:
            SchemeNotFoundError: If the scheme does not exist or is deleted
        """
        scheme = await self.schemes.get_by_id_with_details(scheme_id)
        if scheme is None:
            raise SchemeNotFoundError()
        return scheme

    async def list_schemes(self) -> List[Scheme]:
        """Retrieve all schemes with criteria and benefits."""
        return await self.schemes.get_all_with_details()

    async def create_scheme(self, name: str) -> Scheme:
        """Create a scheme with no benefits and no criteria."""
        scheme = await self.schemes.create(name=name)
        logger.info(f"Created scheme {scheme.id} ({name!r})")
        return await self.get_scheme(scheme.id)

    async def update_scheme(self, scheme_id: UUID, fields: Dict[str, Any]) -> Scheme:
        """
        Apply a partial update to a scheme.

        Raises:
            NoUpdateFieldsError: If ``fields`` is empty
            SchemeNotFoundError: If the scheme does not exist
        """
        if not fields:
            raise NoUpdateFieldsError()

        if await self.schemes.update(scheme_id, **fields) is None:
            raise SchemeNotFoundError()

        logger.info(f"Updated scheme {scheme_id}: {sorted(fields)}")
        return await self.get_scheme(scheme_id)

    async def delete_scheme(self, scheme_id: UUID) -> None:
        """
        Soft-delete a scheme.

        Raises:
            SchemeNotFoundError: If the scheme does not exist
        """
        if not await self.schemes.soft_delete(scheme_id):
            raise SchemeNotFoundError()
        logger.info(f"Deleted scheme {scheme_id}")

    async def list_applicant_available_schemes(
        self, applicant_id: UUID, today: Optional[date] = None
    ) -> List[Scheme]:
        """
        Retrieve the schemes an applicant is currently eligible for.

        Schemes, applicant and family are each loaded once; any lookup failure
        aborts the whole call.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist
        """
        schemes = await self.schemes.get_all_with_details()

        applicant = await self.applicants.get_by_id(applicant_id)
        if applicant is None:
            raise ApplicantNotFoundError()

        family = await self.applicants.get_family(applicant_id)

        eligible = self.engine.filter_eligible(schemes, applicant, family, today=today)
        logger.info(
            f"Applicant {applicant_id} is eligible for {len(eligible)} of {len(schemes)} schemes"
        )
        return eligible

    # ===== Benefit Operations =====

    async def _get_benefit(self, benefit_id: UUID) -> Benefit:
        benefit = await self.benefits.get_by_id(benefit_id)
        if benefit is None:
            raise BenefitNotFoundError()
        return benefit

    async def _ensure_scheme_exists(self, scheme_id: UUID) -> None:
        if not await self.schemes.exists(scheme_id):
            raise SchemeNotFoundError()

    async def add_benefit(self, scheme_id: UUID, name: str, amount: Decimal) -> Benefit:
        """
        Add a benefit to a scheme.

        Raises:
            SchemeNotFoundError: If the scheme does not exist
        """
        await self._ensure_scheme_exists(scheme_id)

        benefit = await self.benefits.create(scheme_id=scheme_id, name=name, amount=amount)
        logger.info(f"Added benefit {benefit.id} to scheme {scheme_id}")
        return benefit

    async def update_benefit(self, benefit_id: UUID, fields: Dict[str, Any]) -> Benefit:
        """
        Apply a partial update to a benefit.

        ``fields`` may carry a ``scheme_id`` to move the benefit, in which case
        the target scheme must exist.

        Raises:
            NoUpdateFieldsError: If ``fields`` is empty
            BenefitNotFoundError: If the benefit does not exist
            SchemeNotFoundError: If the target scheme does not exist
        """
        if not fields:
            raise NoUpdateFieldsError()

        await self._get_benefit(benefit_id)
        if "scheme_id" in fields:
            await self._ensure_scheme_exists(fields["scheme_id"])

        benefit = await self.benefits.update(benefit_id, **fields)
        logger.info(f"Updated benefit {benefit_id}: {sorted(fields)}")
        return benefit

    async def delete_benefit(self, benefit_id: UUID) -> None:
        """
        Soft-delete a benefit.

        Raises:
            BenefitNotFoundError: If the benefit does not exist
        """
        if not await self.benefits.soft_delete(benefit_id):
            raise BenefitNotFoundError()
        logger.info(f"Deleted benefit {benefit_id}")

    # ===== Criteria Operations =====

    async def add_criteria(
        self, scheme_id: UUID, name: Optional[str], value: Optional[str]
    ) -> SchemeCriteria:
        """
        Validate and add an eligibility criterion to a scheme.

        The criterion is stored with its normalized name and value.

        Raises:
            CriteriaValidationError: If the name or value is invalid
            SchemeNotFoundError: If the scheme does not exist
        """
        name, value = validate_criteria(name, value)
        await self._ensure_scheme_exists(scheme_id)

        criteria = await self.criteria.create(scheme_id=scheme_id, name=name, value=value)
        logger.info(f"Added criteria {name}={value!r} to scheme {scheme_id}")
        return criteria

    async def update_criteria(self, criteria_id: UUID, fields: Dict[str, Any]) -> SchemeCriteria:
        """
        Apply a partial update to a criterion.

        Missing name or value are taken from the stored criterion and the
        merged pair is validated as a whole.

        Raises:
            NoUpdateFieldsError: If ``fields`` is empty
            SchemeCriteriaNotFoundError: If the criterion does not exist
            CriteriaValidationError: If the merged name or value is invalid
            SchemeNotFoundError: If the target scheme does not exist
        """
        if not fields:
            raise NoUpdateFieldsError()

        existing = await self.criteria.get_by_id(criteria_id)
        if existing is None:
            raise SchemeCriteriaNotFoundError()

        name, value = validate_criteria(
            fields.get("name", existing.name),
            fields.get("value", existing.value),
        )
        changes = {**fields, "name": name, "value": value}

        if "scheme_id" in changes:
            await self._ensure_scheme_exists(changes["scheme_id"])

        criteria = await self.criteria.update(criteria_id, **changes)
        logger.info(f"Updated criteria {criteria_id}: {sorted(fields)}")
        return criteria

    async def delete_criteria(self, criteria_id: UUID) -> None:
        """
        Soft-delete a criterion.

        Raises:
            SchemeCriteriaNotFoundError: If the criterion does not exist
        """
        if not await self.criteria.soft_delete(criteria_id):
            raise SchemeCriteriaNotFoundError()
        logger.info(f"Deleted criteria {criteria_id}")
