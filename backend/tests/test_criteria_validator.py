"""
Tests for write-time criteria validation.
"""

import pytest

from fas.core.errors import (
    CriteriaValidationError,
    EmptyCriteriaError,
    InvalidAgeValueError,
    InvalidCriteriaNameError,
    InvalidEmploymentStatusValueError,
    InvalidHasChildrenValueError,
    InvalidMaritalStatusValueError,
)
from fas.services.eligibility import CRITERIA, validate_criteria


@pytest.mark.parametrize(
    "name, value",
    [
        ("employment_status", "employed"),
        ("employment_status", "unemployed"),
        ("marital_status", "single"),
        ("marital_status", "married"),
        ("marital_status", "widowed"),
        ("marital_status", "divorced"),
        ("has_children", "true"),
        ("has_children", "false"),
        ("age", ">=60"),
        ("age", "<18"),
        ("age", "==30"),
    ],
)
def test_valid_criteria(name, value):
    """Recognized names with well-formed values pass unchanged."""
    assert validate_criteria(name, value) == (name, value)


def test_name_and_value_are_normalized():
    """Case and surrounding whitespace are ignored and stripped."""
    assert validate_criteria("  Employment_Status ", " UNEMPLOYED ") == (
        "employment_status",
        "unemployed",
    )
    assert validate_criteria("HAS_CHILDREN", "True") == ("has_children", "true")


def test_validation_is_idempotent():
    """Validating an already normalized pair yields the same pair."""
    first = validate_criteria(" Age ", " >=60 ")
    assert validate_criteria(*first) == first


@pytest.mark.parametrize(
    "name, value",
    [(None, "employed"), ("employment_status", None), ("", "employed"), ("age", "   ")],
)
def test_empty_criteria(name, value):
    """Missing or blank name or value is rejected before anything else."""
    with pytest.raises(EmptyCriteriaError):
        validate_criteria(name, value)


def test_unknown_name_rejected():
    """Names outside the fixed table are never accepted."""
    with pytest.raises(InvalidCriteriaNameError):
        validate_criteria("favorite_color", "blue")


@pytest.mark.parametrize(
    "name, value, error",
    [
        ("employment_status", "retired", InvalidEmploymentStatusValueError),
        ("marital_status", "divorce", InvalidMaritalStatusValueError),
        ("has_children", "yes", InvalidHasChildrenValueError),
        ("age", "abc", InvalidAgeValueError),
        ("age", ">= ", InvalidAgeValueError),
    ],
)
def test_invalid_values(name, value, error):
    """Each criterion reports its own value error."""
    with pytest.raises(error) as exc_info:
        validate_criteria(name, value)
    assert isinstance(exc_info.value, CriteriaValidationError)
    assert exc_info.value.status_code == 400


def test_criteria_table_is_read_only():
    """The handler table cannot be extended at runtime."""
    assert set(CRITERIA) == {"employment_status", "marital_status", "has_children", "age"}
    with pytest.raises(TypeError):
        CRITERIA["favorite_color"] = CRITERIA["age"]
