"""Box repository protocol.

Collection-like access to Box aggregates by identity. Items are persisted
as part of their box; there is no separate item repository.

Implementations:
    - InMemoryBoxRepository: dict-backed (default, tests)
    - SqlBoxRepository: SQLAlchemy ORM
"""

from typing import Protocol

from boxkeeper.domain.entities.box import Box
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId


class BoxRepository(Protocol):
    """Protocol for box persistence operations.

    **Design Principles**:
    - Methods take and return domain entities, never storage models
    - ``box_id_taken``/``item_id_taken`` are pure existence reads used by
      the unique identifier service
    - ``add`` performs the final uniqueness check; it is the authoritative
      guard against two callers racing on the same candidate
    """

    def box_id_taken(self, box_id: BoxId) -> bool:
        """Check whether a box with this identifier is stored."""
        ...

    def item_id_taken(self, item_id: ItemId) -> bool:
        """Check whether an item with this identifier is stored in any box."""
        ...

    def add(self, box: Box) -> None:
        """Register a new box (with its items).

        Raises:
            IdentifierAlreadyRegistered: If the box id, or one of its item
                ids, is already stored.
        """
        ...

    def save(self, box: Box) -> None:
        """Persist changes to an already registered box.

        Raises:
            KeyError: If the box was never added.
            IdentifierAlreadyRegistered: If a new item id is already stored.
        """
        ...

    def find_by_id(self, box_id: BoxId) -> Box | None:
        """Return the box or None."""
        ...

    def list_all(self) -> list[Box]:
        """Return all boxes."""
        ...

    def remove(self, box_id: BoxId) -> None:
        """Remove a box and its items.

        Raises:
            KeyError: If the box is not stored.
        """
        ...
