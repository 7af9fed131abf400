"""
Tests for the eligibility engine using transient ORM objects.
"""

from datetime import date, datetime, timezone

import pytest

from fas.core.enums import EmploymentStatus, MaritalStatus, RelationshipType, Sex
from fas.models.domain import Applicant, Scheme, SchemeCriteria
from fas.services.eligibility import EligibilityEngine, EvaluationContext, check_eligibility

TODAY = date(2026, 10, 19)


def make_applicant(
    employment_status=EmploymentStatus.UNEMPLOYED,
    marital_status=MaritalStatus.SINGLE,
    born=TODAY.year - 30,
    **kwargs,
):
    return Applicant(
        name=kwargs.pop("name", "Test Applicant"),
        employment_status=employment_status,
        marital_status=marital_status,
        sex=Sex.FEMALE,
        date_of_birth=date(born, 6, 1) if born is not None else None,
        **kwargs,
    )


def make_scheme(*criteria):
    return Scheme(
        name="Test Scheme",
        criteria=[SchemeCriteria(name=name, value=value) for name, value in criteria],
    )


@pytest.fixture
def engine():
    return EligibilityEngine()


def test_no_criteria_is_eligible_for_everyone(engine):
    """A scheme without criteria accepts any applicant."""
    scheme = make_scheme()
    assert engine.check_eligibility(scheme, make_applicant(), today=TODAY) is True
    assert engine.check_eligibility(scheme, make_applicant(born=None), today=TODAY) is True


def test_none_criteria_is_eligible():
    """A scheme whose criteria collection was never populated accepts everyone."""
    scheme = Scheme(name="Bare")
    assert check_eligibility(scheme, make_applicant(), today=TODAY) is True


@pytest.mark.parametrize(
    "value, expected",
    [(">=18", True), ("<18", False), ("==30", True), ("==31", False), (">29", True), ("<=29", False)],
)
def test_age_uses_calendar_year(engine, value, expected):
    """Age is today's year minus the birth year."""
    applicant = make_applicant(born=TODAY.year - 30)
    scheme = make_scheme(("age", value))
    assert engine.check_eligibility(scheme, applicant, today=TODAY) is expected


def test_age_ignores_birthday_not_yet_reached(engine):
    """Someone born in December counts the full year already in January."""
    applicant = make_applicant()
    applicant.date_of_birth = date(1996, 12, 31)
    scheme = make_scheme(("age", "==30"))
    assert engine.check_eligibility(scheme, applicant, today=date(2026, 1, 1)) is True


def test_age_without_date_of_birth_fails(engine):
    scheme = make_scheme(("age", ">=0"))
    assert engine.check_eligibility(scheme, make_applicant(born=None), today=TODAY) is False


def test_malformed_stored_age_fails_instead_of_raising(engine):
    """A stored value that would fail validation evaluates to not satisfied."""
    scheme = make_scheme(("age", "abc"))
    assert engine.check_eligibility(scheme, make_applicant(), today=TODAY) is False


def test_has_children_true_requires_child(engine):
    scheme = make_scheme(("has_children", "true"))
    applicant = make_applicant()
    child = make_applicant(name="Child")

    assert engine.check_eligibility(scheme, applicant, {RelationshipType.CHILD: child}, TODAY) is True
    assert engine.check_eligibility(scheme, applicant, {}, TODAY) is False
    assert engine.check_eligibility(scheme, applicant, {RelationshipType.SPOUSE: child}, TODAY) is False


def test_has_children_false_always_satisfied(engine):
    """'false' does not exclude applicants who do have children."""
    scheme = make_scheme(("has_children", "false"))
    applicant = make_applicant()

    assert engine.check_eligibility(scheme, applicant, {}, TODAY) is True
    assert engine.check_eligibility(scheme, applicant, {RelationshipType.CHILD: applicant}, TODAY) is True


def test_family_keys_may_be_plain_strings():
    """Raw string keys are matched by value; unknown tags are ignored."""
    context = EvaluationContext(
        applicant=make_applicant(),
        family={"child": None, "cousin": None},
        today=TODAY,
    )
    assert context.relationship_types == frozenset({RelationshipType.CHILD})


def test_status_criteria(engine):
    scheme = make_scheme(("employment_status", "employed"), ("marital_status", "married"))
    employed_married = make_applicant(EmploymentStatus.EMPLOYED, MaritalStatus.MARRIED)
    employed_single = make_applicant(EmploymentStatus.EMPLOYED, MaritalStatus.SINGLE)

    assert engine.check_eligibility(scheme, employed_married, today=TODAY) is True
    assert engine.check_eligibility(scheme, employed_single, today=TODAY) is False


def test_stored_values_are_normalized_at_evaluation(engine):
    """Mixed-case or padded values written before normalization still match."""
    scheme = make_scheme((" Employment_Status ", " UNEMPLOYED "))
    assert engine.check_eligibility(scheme, make_applicant(), today=TODAY) is True


def test_unknown_criterion_is_skipped(engine):
    scheme = make_scheme(("favorite_color", "blue"))
    assert engine.check_eligibility(scheme, make_applicant(), today=TODAY) is True


def test_criteria_are_anded(engine):
    """One failing criterion fails the scheme; removing it can only help."""
    applicant = make_applicant(EmploymentStatus.EMPLOYED, born=TODAY.year - 65)
    failing = ("employment_status", "unemployed")
    passing = ("age", ">=60")

    assert engine.check_eligibility(make_scheme(passing, failing), applicant, today=TODAY) is False
    assert engine.check_eligibility(make_scheme(passing), applicant, today=TODAY) is True


def test_deleted_criteria_are_ignored(engine):
    scheme = make_scheme(("employment_status", "employed"))
    scheme.criteria[0].deleted_at = datetime.now(timezone.utc)
    assert engine.check_eligibility(scheme, make_applicant(), today=TODAY) is True


def test_retirement_scheme_scenario(engine):
    """Unemployed seniors qualify; employed seniors and younger applicants do not."""
    scheme = make_scheme(("employment_status", "unemployed"), ("age", ">=60"))
    a = make_applicant(EmploymentStatus.UNEMPLOYED, born=TODAY.year - 65, name="A")
    b = make_applicant(EmploymentStatus.EMPLOYED, born=TODAY.year - 65, name="B")
    c = make_applicant(EmploymentStatus.UNEMPLOYED, born=TODAY.year - 50, name="C")

    assert engine.check_eligibility(scheme, a, today=TODAY) is True
    assert engine.check_eligibility(scheme, b, today=TODAY) is False
    assert engine.check_eligibility(scheme, c, today=TODAY) is False


def test_filter_eligible_preserves_order(engine):
    open_scheme = make_scheme()
    seniors = make_scheme(("age", ">=60"))
    unemployed = make_scheme(("employment_status", "unemployed"))
    applicant = make_applicant(EmploymentStatus.UNEMPLOYED, born=TODAY.year - 40)

    eligible = engine.filter_eligible([open_scheme, seniors, unemployed], applicant, today=TODAY)
    assert eligible == [open_scheme, unemployed]
