"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Declarative base for ALL models (shared metadata)
- TimestampMixin: Adds created_at / updated_at
- BaseMutableModel: Recommended base for mutable models (combines above)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities do NOT inherit from this
- Repositories map domain entities to/from these models

Primary keys are the domain's 64-bit identifiers, supplied by the
application (``autoincrement=False``). The primary key constraint is the
authoritative uniqueness guard.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Declarative base holding the shared metadata."""

    def to_dict(self) -> dict[str, Any]:
        """Convert model columns to a dictionary (for debugging/logging)."""
        return {
            column.key: getattr(self, column.key) for column in self.__table__.columns
        }


class TimestampMixin:
    """Mixin for models that track creation and modification time."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),  # Refreshed on UPDATE
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - created_at: Timestamp when created (from TimestampMixin)
        - updated_at: Timestamp when last updated (from TimestampMixin)

    Usage:
        class BoxModel(BaseMutableModel):
            __tablename__ = "boxes"
            id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    """

    __abstract__ = True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"
