"""Domain errors with the HTTP status and message each one maps to."""

from typing import Optional

from fastapi import status


class DomainError(Exception):
    """
    Base class for every error the service layer raises on purpose.

    Subclasses only override the class attributes; the exception handler in
    ``fas.main`` turns them into ``{"success": false, "message": ...}``.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# ==================== Malformed identifiers ====================


class InvalidApplicantIDError(DomainError):
    message = "Invalid applicant id."


class InvalidSchemeIDError(DomainError):
    message = "Invalid scheme id."


class InvalidBenefitIDError(DomainError):
    message = "Invalid benefit id."


class InvalidApplicationIDError(DomainError):
    message = "Invalid application id."


class InvalidSchemeCriteriaIDError(DomainError):
    message = "Invalid scheme criteria id."


class InvalidRelationshipIDError(DomainError):
    message = "Invalid relationship id."


# ==================== Lookup misses ====================


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Data not found."


class ApplicantNotFoundError(NotFoundError):
    message = "Applicant not found."


class SchemeNotFoundError(NotFoundError):
    message = "Scheme not found."


class BenefitNotFoundError(NotFoundError):
    message = "Benefit not found."


class ApplicationNotFoundError(NotFoundError):
    message = "Application not found."


class SchemeCriteriaNotFoundError(NotFoundError):
    message = "Scheme criteria not found."


class RelationshipNotFoundError(NotFoundError):
    message = "Relationship not found."


# ==================== Criteria validation ====================


class CriteriaValidationError(DomainError):
    message = "Invalid scheme criteria."


class EmptyCriteriaError(CriteriaValidationError):
    message = "Scheme criteria name and value are required."


class InvalidCriteriaNameError(CriteriaValidationError):
    message = (
        "Invalid scheme criteria name. "
        "Expected one of: employment_status, marital_status, has_children, age."
    )


class InvalidAgeValueError(CriteriaValidationError):
    message = "Invalid age criteria value. Expected an operator (>=, <=, >, <, ==) followed by a whole number."


class InvalidEmploymentStatusValueError(CriteriaValidationError):
    message = "Invalid employment status criteria value. Expected one of: employed, unemployed."


class InvalidMaritalStatusValueError(CriteriaValidationError):
    message = "Invalid marital status criteria value. Expected one of: single, married, widowed, divorced."


class InvalidHasChildrenValueError(CriteriaValidationError):
    message = "Invalid has children criteria value. Expected true or false."


# ==================== Write preconditions ====================


class NoUpdateFieldsError(DomainError):
    message = "No fields to update."


class SchemeNotEligibleError(DomainError):
    message = "Applicant does not meet the eligibility criteria for the scheme."


class InvalidRelationshipError(DomainError):
    message = "An applicant cannot be related to themselves."
