"""Write-time validation of scheme criteria."""

from typing import Optional

from fas.core.errors import EmptyCriteriaError, InvalidCriteriaNameError
from fas.services.eligibility.base import normalize
from fas.services.eligibility.criteria import CRITERIA


def validate_criteria(name: Optional[str], value: Optional[str]) -> tuple[str, str]:
    """
    Validate a criteria name/value pair before it is persisted.

    Args:
        name: Criteria name, case and surrounding whitespace are ignored
        value: Criteria value, checked against the grammar for ``name``

    Returns:
        The normalized ``(name, value)`` pair

    Raises:
        EmptyCriteriaError: If name or value is missing or blank
        InvalidCriteriaNameError: If name is not a recognized criteria name
        CriteriaValidationError: The value error specific to ``name``
    """
    if name is None or value is None or not name.strip() or not value.strip():
        raise EmptyCriteriaError()

    name = normalize(name)
    value = normalize(value)

    handler = CRITERIA.get(name)
    if handler is None:
        raise InvalidCriteriaNameError()

    handler.validate(value)
    return name, value
