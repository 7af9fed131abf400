"""Pydantic schemas for scheme applications."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ApplicationCreate(BaseModel):
    """Schema for creating an application."""

    applicant_id: str = Field(..., description="UUID of the applicant")
    scheme_id: str = Field(..., description="UUID of the scheme")


class ApplicationUpdate(BaseModel):
    """Schema for updating an application (all fields optional)."""

    applicant_id: Optional[str] = None
    scheme_id: Optional[str] = None


class ApplicationResponse(BaseModel):
    """Schema for application response."""

    id: UUID
    applicant_id: UUID
    scheme_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
