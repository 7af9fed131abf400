"""Evaluation context and base criterion handler for the eligibility engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from fas.core.enums import CriteriaName, RelationshipType
from fas.models.domain.applicant import Applicant


def normalize(text: str) -> str:
    """Trim and lower-case a criteria name or value."""
    return text.strip().lower()


def enum_value(value: Any) -> Optional[str]:
    """Plain string form of an enum member or raw string column value."""
    if value is None:
        return None
    return getattr(value, "value", value)


@dataclass
class EvaluationContext:
    """
    Everything a criterion needs to decide whether an applicant satisfies it.

    Attributes:
        applicant: The applicant being evaluated
        family: Mapping of relationship type to the related applicant; only the
            keys are consulted
        today: Evaluation date, used for age calculation
    """

    applicant: Applicant
    family: Mapping[Any, Any] = field(default_factory=dict)
    today: date = field(default_factory=date.today)

    @property
    def relationship_types(self) -> frozenset[RelationshipType]:
        """Relationship types present on the applicant, unknown tags dropped."""
        types = set()
        for key in self.family or {}:
            try:
                types.add(RelationshipType(enum_value(key)))
            except ValueError:
                continue
        return frozenset(types)


class CriterionHandler(ABC):
    """
    Validation and evaluation logic for one criteria name.

    ``validate`` runs when a criterion is written, ``evaluate`` when an
    applicant is checked against a scheme. Both receive the normalized value.
    """

    name: CriteriaName

    @abstractmethod
    def validate(self, value: str) -> None:
        """
        Check that ``value`` is well formed for this criterion.

        Raises:
            CriteriaValidationError: The specific subclass for this criterion
        """

    @abstractmethod
    def evaluate(self, value: str, context: EvaluationContext) -> bool:
        """Return whether the applicant in ``context`` satisfies ``value``."""
