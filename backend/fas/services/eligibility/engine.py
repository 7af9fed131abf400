"""Eligibility engine folding criterion handlers over a scheme's criteria."""

import logging
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional

from fas.models.domain.applicant import Applicant
from fas.models.domain.scheme import Scheme, SchemeCriteria
from fas.services.eligibility.base import EvaluationContext, normalize
from fas.services.eligibility.criteria import CRITERIA

logger = logging.getLogger(__name__)


class EligibilityEngine:
    """
    Decides whether an applicant qualifies for a scheme.

    The engine is stateless: every call builds its own EvaluationContext and
    only reads from the objects it is given.
    """

    def __init__(self):
        """Initialize the engine with the fixed criterion handler table."""
        self._handlers = CRITERIA

    def evaluate_criterion(
        self,
        criterion: SchemeCriteria,
        context: EvaluationContext,
    ) -> bool:
        """
        Evaluate a single criterion against the context.

        Unrecognized criteria names are treated as satisfied.
        """
        name = normalize(criterion.name or "")
        value = normalize(criterion.value or "")

        handler = self._handlers.get(name)
        if handler is None:
            logger.debug(f"Skipping unrecognized criterion {criterion.name!r}")
            return True

        return handler.evaluate(value, context)

    def check_eligibility(
        self,
        scheme: Scheme,
        applicant: Applicant,
        family: Optional[Mapping[Any, Any]] = None,
        today: Optional[date] = None,
    ) -> bool:
        """
        Check whether an applicant satisfies every criterion of a scheme.

        Args:
            scheme: Scheme with its criteria loaded
            applicant: Applicant being checked
            family: Relationship type to related applicant mapping
            today: Evaluation date, defaults to the current date

        Returns:
            True if the scheme has no criteria or every criterion is satisfied
        """
        criteria = [
            c for c in scheme.criteria or [] if getattr(c, "deleted_at", None) is None
        ]
        if not criteria:
            return True

        context = EvaluationContext(
            applicant=applicant,
            family=family or {},
            today=today or date.today(),
        )

        for criterion in criteria:
            if not self.evaluate_criterion(criterion, context):
                logger.debug(
                    f"Applicant {applicant.id} fails criterion "
                    f"{criterion.name}={criterion.value!r} of scheme {scheme.id}"
                )
                return False

        return True

    def filter_eligible(
        self,
        schemes: Iterable[Scheme],
        applicant: Applicant,
        family: Optional[Mapping[Any, Any]] = None,
        today: Optional[date] = None,
    ) -> List[Scheme]:
        """Return the schemes the applicant is eligible for, preserving order."""
        today = today or date.today()
        return [
            scheme
            for scheme in schemes
            if self.check_eligibility(scheme, applicant, family, today=today)
        ]


_default_engine = EligibilityEngine()


def check_eligibility(
    scheme: Scheme,
    applicant: Applicant,
    family: Optional[Mapping[Any, Any]] = None,
    today: Optional[date] = None,
) -> bool:
    """Module-level shortcut for ``EligibilityEngine().check_eligibility``."""
    return _default_engine.check_eligibility(scheme, applicant, family, today=today)
