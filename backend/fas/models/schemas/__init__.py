"""Pydantic schemas for API validation and serialization."""

from fas.models.schemas.applicant import (
    ApplicantCreate,
    ApplicantResponse,
    ApplicantUpdate,
    RelationshipCreate,
    RelationshipResponse,
)
from fas.models.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
)
from fas.models.schemas.common import ApiResponse, ErrorResponse
from fas.models.schemas.scheme import (
    BenefitCreate,
    BenefitResponse,
    BenefitUpdate,
    CriteriaCreate,
    CriteriaResponse,
    CriteriaUpdate,
    SchemeCreate,
    SchemeResponse,
    SchemeUpdate,
)

__all__ = [
    # Envelopes
    "ApiResponse",
    "ErrorResponse",
    # Applicant schemas
    "ApplicantCreate",
    "ApplicantUpdate",
    "ApplicantResponse",
    "RelationshipCreate",
    "RelationshipResponse",
    # Scheme schemas
    "SchemeCreate",
    "SchemeUpdate",
    "SchemeResponse",
    "BenefitCreate",
    "BenefitUpdate",
    "BenefitResponse",
    "CriteriaCreate",
    "CriteriaUpdate",
    "CriteriaResponse",
    # Application schemas
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationResponse",
]
