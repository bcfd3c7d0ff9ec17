"""In-memory box repository.

Dictionary-backed implementation of the BoxRepository protocol. Boxes are
kept in insertion order and handed out by reference (an identity map), so
``find_by_id`` returns the same object that was added.
"""

import threading

from boxkeeper.domain.entities.box import Box
from boxkeeper.domain.errors import IdentifierAlreadyRegistered
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId


class InMemoryBoxRepository:
    """In-memory implementation of BoxRepository protocol.

    Thread Safety:
        - All operations take an internal lock
        - ``add`` checks and inserts atomically, so it is a real uniqueness
          guard even when two callers race on the same identifier

    Attributes:
        _boxes: BoxId -> Box, insertion ordered.
        _item_owners: ItemId -> BoxId for every stored item.
    """

    def __init__(self) -> None:
        self._boxes: dict[BoxId, Box] = {}
        self._item_owners: dict[ItemId, BoxId] = {}
        self._lock = threading.RLock()

    def box_id_taken(self, box_id: BoxId) -> bool:
        with self._lock:
            return box_id in self._boxes

    def item_id_taken(self, item_id: ItemId) -> bool:
        with self._lock:
            return item_id in self._item_owners

    def add(self, box: Box) -> None:
        with self._lock:
            if box.box_id in self._boxes:
                raise IdentifierAlreadyRegistered(box.box_id)
            for item in box.items:
                if item.item_id in self._item_owners:
                    raise IdentifierAlreadyRegistered(item.item_id)
            self._boxes[box.box_id] = box
            for item in box.items:
                self._item_owners[item.item_id] = box.box_id

    def save(self, box: Box) -> None:
        with self._lock:
            if box.box_id not in self._boxes:
                raise KeyError(box.box_id)
            for item in box.items:
                owner = self._item_owners.get(item.item_id)
                if owner is not None and owner != box.box_id:
                    raise IdentifierAlreadyRegistered(item.item_id)
            self._forget_items(box.box_id)
            self._boxes[box.box_id] = box
            for item in box.items:
                self._item_owners[item.item_id] = box.box_id

    def find_by_id(self, box_id: BoxId) -> Box | None:
        with self._lock:
            return self._boxes.get(box_id)

    def list_all(self) -> list[Box]:
        with self._lock:
            return list(self._boxes.values())

    def remove(self, box_id: BoxId) -> None:
        with self._lock:
            if box_id not in self._boxes:
                raise KeyError(box_id)
            self._forget_items(box_id)
            del self._boxes[box_id]

    def _forget_items(self, box_id: BoxId) -> None:
        stale = [item_id for item_id, owner in self._item_owners.items() if owner == box_id]
        for item_id in stale:
            del self._item_owners[item_id]
