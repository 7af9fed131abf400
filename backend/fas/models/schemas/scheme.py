"""Pydantic schemas for schemes, benefits and criteria."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ==================== Benefit Schemas ====================


class BenefitCreate(BaseModel):
    """Schema for adding a benefit to a scheme."""

    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)


class BenefitUpdate(BaseModel):
    """Schema for updating a benefit (all fields optional)."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(None, ge=0)
    scheme_id: Optional[str] = Field(None, description="Move the benefit to another scheme")


class BenefitResponse(BaseModel):
    """Schema for benefit response."""

    id: UUID
    scheme_id: UUID
    name: str
    amount: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ==================== Criteria Schemas ====================


class CriteriaCreate(BaseModel):
    """
    Schema for adding an eligibility criterion to a scheme.

    Name and value are checked by the criteria validator rather than here, so
    that each kind of mistake gets its own error message.
    """

    name: Optional[str] = Field(None, examples=["age"])
    value: Optional[str] = Field(None, examples=[">=60"])


class CriteriaUpdate(BaseModel):
    """Schema for updating a criterion (all fields optional)."""

    name: Optional[str] = None
    value: Optional[str] = None
    scheme_id: Optional[str] = Field(None, description="Move the criterion to another scheme")


class CriteriaResponse(BaseModel):
    """Schema for criterion response."""

    id: UUID
    scheme_id: UUID
    name: str
    value: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ==================== Scheme Schemas ====================


class SchemeCreate(BaseModel):
    """Schema for creating a scheme."""

    name: str = Field(..., min_length=1, max_length=255)


class SchemeUpdate(BaseModel):
    """Schema for updating a scheme (all fields optional)."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)


class SchemeResponse(BaseModel):
    """Schema for scheme response with criteria and benefits."""

    id: UUID
    name: str
    criteria: list[CriteriaResponse] = []
    benefits: list[BenefitResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
