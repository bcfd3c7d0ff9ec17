"""Item database model."""

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boxkeeper.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from boxkeeper.infrastructure.persistence.models.box import BoxModel


class ItemModel(BaseMutableModel):
    """Item table.

    Fields:
        id: Domain ItemId value (64-bit, application supplied, globally unique)
        box_id: Owning box (FK boxes.id, cascade delete)
        title: Display title
        position: Order inside the box

    Indexes:
        - ix_items_box_id: (box_id) - load items of a box
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=False,
    )

    box_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("boxes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    box: Mapped["BoxModel"] = relationship(back_populates="items")
