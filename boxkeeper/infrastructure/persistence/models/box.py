"""Box database model."""

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boxkeeper.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from boxkeeper.infrastructure.persistence.models.item import ItemModel


class BoxModel(BaseMutableModel):
    """Box table.

    Fields:
        id: Domain BoxId value (64-bit, application supplied)
        title: Display title
        items: Child rows ordered by position (deleted with the box)
        created_at / updated_at: From BaseMutableModel
    """

    __tablename__ = "boxes"

    id: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=False,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    items: Mapped[list["ItemModel"]] = relationship(
        back_populates="box",
        cascade="all, delete-orphan",
        order_by="ItemModel.position",
        lazy="selectin",
    )
