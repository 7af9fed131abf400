"""Scheme, benefit and eligibility criteria domain models."""

import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fas.db.base import BaseModel


class Scheme(BaseModel):
    """Assistance program with benefits and eligibility criteria."""

    __tablename__ = "schemes"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    benefits: Mapped[list["Benefit"]] = relationship(
        "Benefit",
        back_populates="scheme",
    )
    criteria: Mapped[list["SchemeCriteria"]] = relationship(
        "SchemeCriteria",
        back_populates="scheme",
    )

    def __repr__(self) -> str:
        return f"<Scheme(id={self.id}, name={self.name!r})>"


class Benefit(BaseModel):
    """Monetary entitlement attached to a scheme."""

    __tablename__ = "benefits"

    scheme_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("schemes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    # Relationships
    scheme: Mapped["Scheme"] = relationship(
        "Scheme",
        back_populates="benefits",
    )

    def __repr__(self) -> str:
        return f"<Benefit(id={self.id}, name={self.name!r}, amount={self.amount})>"


class SchemeCriteria(BaseModel):
    """
    Single eligibility rule attached to a scheme.

    ``name`` is one of the ``CriteriaName`` values and ``value`` is a string
    whose grammar depends on it, e.g. ``age`` / ``">=60"``. Both are stored
    normalized (trimmed, lower-cased).
    """

    __tablename__ = "scheme_criteria"

    scheme_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("schemes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    scheme: Mapped["Scheme"] = relationship(
        "Scheme",
        back_populates="criteria",
    )

    def __repr__(self) -> str:
        return f"<SchemeCriteria(id={self.id}, name={self.name!r}, value={self.value!r})>"
