"""SQL box repository implementation.

SQLAlchemy implementation of the BoxRepository protocol. Maps between the
Box aggregate (with its items) and the BoxModel/ItemModel tables.

Writes flush but do not commit; the owner of the session decides when to
commit (see ``Database.get_session`` and ``AppContext.commit``). Each write
runs in a SAVEPOINT, so a rejected write leaves earlier uncommitted work of
the same session in place.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boxkeeper.domain.entities.box import Box
from boxkeeper.domain.entities.item import Item
from boxkeeper.domain.errors import IdentifierAlreadyRegistered
from boxkeeper.domain.value_objects.identifiers import BoxId, Identifier, ItemId
from boxkeeper.infrastructure.persistence.models import BoxModel, ItemModel


class SqlBoxRepository:
    """SQLAlchemy implementation of BoxRepository protocol.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database models
    - Uses select() for queries (SQLAlchemy 2.0 style)
    - Existence checks are plain SELECTs with no side effects
    - A primary key violation on flush becomes IdentifierAlreadyRegistered;
      only the SAVEPOINT of that write is rolled back
    """

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session.
        """
        self._session = session

    def box_id_taken(self, box_id: BoxId) -> bool:
        stmt = select(BoxModel.id).where(BoxModel.id == box_id.value)
        return self._session.execute(stmt).scalar_one_or_none() is not None

    def item_id_taken(self, item_id: ItemId) -> bool:
        stmt = select(ItemModel.id).where(ItemModel.id == item_id.value)
        return self._session.execute(stmt).scalar_one_or_none() is not None

    def add(self, box: Box) -> None:
        """Insert a new box with its items.

        Raises:
            IdentifierAlreadyRegistered: Box or item id already stored.
        """
        if self.box_id_taken(box.box_id):
            raise IdentifierAlreadyRegistered(box.box_id)
        for item in box.items:
            if self.item_id_taken(item.item_id):
                raise IdentifierAlreadyRegistered(item.item_id)

        with self._savepoint(box.box_id):
            self._session.add(self._to_model(box))

    def save(self, box: Box) -> None:
        """Update title and synchronize items of a stored box.

        Raises:
            KeyError: Box not stored.
            IdentifierAlreadyRegistered: A new item id is already stored.
        """
        model = self._session.get(BoxModel, box.box_id.value)
        if model is None:
            raise KeyError(box.box_id)

        with self._savepoint(box.box_id):
            model.title = box.title

            wanted = {item.item_id.value for item in box.items}
            for item_model in list(model.items):
                if item_model.id not in wanted:
                    model.items.remove(item_model)  # delete-orphan

            existing = {item_model.id: item_model for item_model in model.items}
            for position, item in enumerate(box.items):
                item_model = existing.get(item.item_id.value)
                if item_model is None:
                    if self.item_id_taken(item.item_id):
                        raise IdentifierAlreadyRegistered(item.item_id)
                    model.items.append(
                        ItemModel(
                            id=item.item_id.value,
                            title=item.title,
                            position=position,
                        )
                    )
                else:
                    item_model.title = item.title
                    item_model.position = position

    def find_by_id(self, box_id: BoxId) -> Box | None:
        model = self._session.get(BoxModel, box_id.value)
        if model is None:
            return None
        return self._to_entity(model)

    def list_all(self) -> list[Box]:
        """List all boxes, oldest first."""
        stmt = select(BoxModel).order_by(BoxModel.created_at, BoxModel.id)
        models = self._session.execute(stmt).scalars().all()
        return [self._to_entity(m) for m in models]

    def remove(self, box_id: BoxId) -> None:
        """Delete a box; its items go with it.

        Raises:
            KeyError: Box not stored.
        """
        model = self._session.get(BoxModel, box_id.value)
        if model is None:
            raise KeyError(box_id)
        self._session.delete(model)
        self._session.flush()

    @contextmanager
    def _savepoint(self, identifier: Identifier) -> Iterator[None]:
        """Run writes in a SAVEPOINT and flush them on exit.

        Any failure rolls back the SAVEPOINT only; the enclosing transaction
        and its pending writes survive.

        Raises:
            IdentifierAlreadyRegistered: Flush hit a primary key violation.
        """
        try:
            with self._session.begin_nested():
                yield
                self._session.flush()
        except IntegrityError as e:
            raise IdentifierAlreadyRegistered(identifier) from e

    def _to_entity(self, model: BoxModel) -> Box:
        """Map database model to domain entity.

        Args:
            model: Database model.

        Returns:
            Domain entity (no pending events).
        """
        box_id = BoxId(model.id)
        return Box(
            box_id=box_id,
            title=model.title,
            items=[
                Item(item_id=ItemId(item.id), box_id=box_id, title=item.title)
                for item in sorted(model.items, key=lambda i: i.position)
            ],
        )

    def _to_model(self, entity: Box) -> BoxModel:
        """Map domain entity to database model.

        Args:
            entity: Domain entity.

        Returns:
            Database model.
        """
        return BoxModel(
            id=entity.box_id.value,
            title=entity.title,
            items=[
                ItemModel(id=item.item_id.value, title=item.title, position=position)
                for position, item in enumerate(entity.items)
            ],
        )
