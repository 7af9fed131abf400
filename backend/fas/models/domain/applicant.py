"""Applicant and family relationship domain models."""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import Date, Enum as SQLEnum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fas.core.enums import EmploymentStatus, MaritalStatus, RelationshipType, Sex
from fas.db.base import BaseModel


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Applicant(BaseModel):
    """Person tracked by the system who may apply to schemes."""

    __tablename__ = "applicants"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    employment_status: Mapped[EmploymentStatus] = mapped_column(
        SQLEnum(EmploymentStatus, name="employment_status", values_callable=_enum_values),
        nullable=False,
    )
    marital_status: Mapped[MaritalStatus] = mapped_column(
        SQLEnum(MaritalStatus, name="marital_status", values_callable=_enum_values),
        nullable=False,
    )
    sex: Mapped[Sex] = mapped_column(
        SQLEnum(Sex, name="sex", values_callable=_enum_values),
        nullable=False,
    )
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Relationships
    relationships: Mapped[list["FamilyRelationship"]] = relationship(
        "FamilyRelationship",
        foreign_keys="FamilyRelationship.applicant_a_id",
        back_populates="applicant",
    )

    def __repr__(self) -> str:
        return (
            f"<Applicant(id={self.id}, name={self.name!r}, "
            f"employment_status={self.employment_status}, marital_status={self.marital_status})>"
        )


class FamilyRelationship(BaseModel):
    """Directed family edge from applicant A to applicant B."""

    __tablename__ = "relationships"

    applicant_a_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("applicants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_b_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("applicants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    relationship_type: Mapped[RelationshipType] = mapped_column(
        SQLEnum(RelationshipType, name="relationship_type", values_callable=_enum_values),
        nullable=False,
    )

    # Relationships
    applicant: Mapped["Applicant"] = relationship(
        "Applicant",
        foreign_keys=[applicant_a_id],
        back_populates="relationships",
    )
    related_applicant: Mapped["Applicant"] = relationship(
        "Applicant",
        foreign_keys=[applicant_b_id],
    )

    def __repr__(self) -> str:
        return (
            f"<FamilyRelationship(id={self.id}, a={self.applicant_a_id}, "
            f"b={self.applicant_b_id}, type={self.relationship_type})>"
        )
