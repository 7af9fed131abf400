"""Application domain model linking an applicant to a scheme."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fas.db.base import BaseModel
from fas.models.domain.applicant import Applicant
from fas.models.domain.scheme import Scheme


class Application(BaseModel):
    """An applicant's enrollment record for one scheme."""

    __tablename__ = "applications"

    applicant_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("applicants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    scheme_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("schemes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    applicant: Mapped["Applicant"] = relationship("Applicant")
    scheme: Mapped["Scheme"] = relationship("Scheme")

    def __repr__(self) -> str:
        return (
            f"<Application(id={self.id}, applicant_id={self.applicant_id}, "
            f"scheme_id={self.scheme_id})>"
        )
