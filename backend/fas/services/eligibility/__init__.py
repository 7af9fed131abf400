"""Eligibility engine for evaluating applicants against scheme criteria."""

from .base import CriterionHandler, EvaluationContext
from .comparison import compare_number, parse_condition
from .criteria import CRITERIA
from .engine import EligibilityEngine, check_eligibility
from .validator import validate_criteria

__all__ = [
    "CRITERIA",
    "CriterionHandler",
    "EligibilityEngine",
    "EvaluationContext",
    "check_eligibility",
    "compare_number",
    "parse_condition",
    "validate_criteria",
]
