"""Pydantic schemas for applicants and family relationships."""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fas.core.enums import EmploymentStatus, MaritalStatus, RelationshipType, Sex


# ==================== Applicant Schemas ====================


class ApplicantBase(BaseModel):
    """Base schema for applicant with common fields."""

    name: str = Field(..., min_length=1, max_length=255)
    employment_status: EmploymentStatus
    marital_status: MaritalStatus
    sex: Sex
    date_of_birth: Optional[date] = None

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, v: Optional[date]) -> Optional[date]:
        """Ensure date of birth is not in the future."""
        if v and v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v


class ApplicantCreate(ApplicantBase):
    """Schema for creating an applicant."""

    pass


class ApplicantUpdate(BaseModel):
    """Schema for updating an applicant (all fields optional)."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    employment_status: Optional[EmploymentStatus] = None
    marital_status: Optional[MaritalStatus] = None
    sex: Optional[Sex] = None
    date_of_birth: Optional[date] = None

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, v: Optional[date]) -> Optional[date]:
        """Ensure date of birth is not in the future."""
        if v and v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v


class ApplicantResponse(ApplicantBase):
    """Schema for applicant response."""

    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ==================== Family Relationship Schemas ====================


class RelationshipCreate(BaseModel):
    """Schema for adding a family member to an applicant."""

    related_applicant_id: str = Field(..., description="UUID of the related applicant")
    relationship_type: RelationshipType


class RelationshipResponse(BaseModel):
    """Schema for family relationship response."""

    id: UUID
    applicant_id: UUID = Field(..., validation_alias="applicant_a_id")
    related_applicant_id: UUID = Field(..., validation_alias="applicant_b_id")
    relationship_type: RelationshipType
    related_applicant: ApplicantResponse
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
