"""Criterion handlers, one per recognized criteria name."""

from types import MappingProxyType
from typing import Mapping

from fas.core.enums import CriteriaName, EmploymentStatus, MaritalStatus, RelationshipType
from fas.core.errors import (
    InvalidAgeValueError,
    InvalidEmploymentStatusValueError,
    InvalidHasChildrenValueError,
    InvalidMaritalStatusValueError,
)
from fas.services.eligibility.base import CriterionHandler, EvaluationContext, enum_value
from fas.services.eligibility.comparison import compare_number, parse_condition


class EmploymentStatusCriterion(CriterionHandler):
    """Applicant employment status must equal the value."""

    name = CriteriaName.EMPLOYMENT_STATUS

    def validate(self, value: str) -> None:
        if value not in {status.value for status in EmploymentStatus}:
            raise InvalidEmploymentStatusValueError()

    def evaluate(self, value: str, context: EvaluationContext) -> bool:
        return value == enum_value(context.applicant.employment_status)


class MaritalStatusCriterion(CriterionHandler):
    """Applicant marital status must equal the value."""

    name = CriteriaName.MARITAL_STATUS

    def validate(self, value: str) -> None:
        if value not in {status.value for status in MaritalStatus}:
            raise InvalidMaritalStatusValueError()

    def evaluate(self, value: str, context: EvaluationContext) -> bool:
        return value == enum_value(context.applicant.marital_status)


class HasChildrenCriterion(CriterionHandler):
    """
    ``"true"`` requires a child relationship on the applicant.

    ``"false"`` is always satisfied: applicants with children are not excluded.
    """

    name = CriteriaName.HAS_CHILDREN

    def validate(self, value: str) -> None:
        if value not in ("true", "false"):
            raise InvalidHasChildrenValueError()

    def evaluate(self, value: str, context: EvaluationContext) -> bool:
        if value == "true":
            return RelationshipType.CHILD in context.relationship_types
        return value == "false"


class AgeCriterion(CriterionHandler):
    """
    Applicant age must satisfy a comparison such as ``">=60"``.

    Age is the difference between the current year and the birth year, with no
    adjustment for whether the birthday has passed yet this year.
    """

    name = CriteriaName.AGE

    def validate(self, value: str) -> None:
        parse_condition(value)

    def evaluate(self, value: str, context: EvaluationContext) -> bool:
        date_of_birth = context.applicant.date_of_birth
        if date_of_birth is None:
            return False

        age = context.today.year - date_of_birth.year
        try:
            return compare_number(value, age)
        except InvalidAgeValueError:
            return False


CRITERIA: Mapping[str, CriterionHandler] = MappingProxyType(
    {
        handler.name.value: handler
        for handler in (
            EmploymentStatusCriterion(),
            MaritalStatusCriterion(),
            HasChildrenCriterion(),
            AgeCriterion(),
        )
    }
)
