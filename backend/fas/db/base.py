"""Declarative base and shared columns for all domain models."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base holding the shared metadata."""

    pass


class BaseModel(Base):
    """
    Abstract base model with UUID primary key, timestamps and soft-delete marker.

    Rows are never physically removed by the application; ``deleted_at`` is set
    instead and every read path filters on ``deleted_at IS NULL``.
    """

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
