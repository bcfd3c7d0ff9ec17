"""Box aggregate root.

A box owns an ordered collection of items and enforces the invariants over
them: items are created only through the box, item identifiers are unique
within it, and every mutation records a domain event.

Mutations do not publish anything themselves. They append to the box's
pending events; the application handler saves the box and then publishes
``collect_events()``.

Usage:
    >>> box = Box.provision(BoxId(1), "Inbox")
    >>> item = box.add_item(ItemId(10), "Milk")
    >>> [type(e).__name__ for e in box.collect_events()]
    ['BoxProvisioned', 'ItemProvisioned']
"""

from dataclasses import dataclass, field

from boxkeeper.domain.entities.item import DEFAULT_ITEM_TITLE, Item, normalize_title
from boxkeeper.domain.errors.exceptions import IdentifierAlreadyRegistered
from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.events.box_events import (
    BoxProvisioned,
    BoxTitleChanged,
    ItemProvisioned,
    ItemRemoved,
    ItemTitleChanged,
)
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId

DEFAULT_BOX_TITLE = "New Box"


@dataclass
class Box:
    """Container entity (aggregate root).

    Attributes:
        box_id: Identifier, assigned once at creation.
        title: Display title.
        items: Items in insertion order. Pass only when rebuilding a stored
            box; use ``add_item`` for new items.
    """

    box_id: BoxId
    title: str = DEFAULT_BOX_TITLE
    items: list[Item] = field(default_factory=list)
    _pending_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate box after initialization.

        Raises:
            TypeError: If box_id is not a BoxId.
            ValueError: If title is empty, or items belong to another box or
                repeat an identifier.
        """
        if not isinstance(self.box_id, BoxId):
            raise TypeError("Box.box_id must be a BoxId")
        self.title = normalize_title(self.title)
        if not self.title:
            raise ValueError("Box title cannot be empty")

        seen: set[ItemId] = set()
        for item in self.items:
            if item.box_id != self.box_id:
                raise ValueError(f"Item {item.item_id} belongs to box {item.box_id}")
            if item.item_id in seen:
                raise ValueError(f"Duplicate item id {item.item_id}")
            seen.add(item.item_id)

    @classmethod
    def provision(cls, box_id: BoxId, title: str | None = None) -> "Box":
        """Create a new box and record BoxProvisioned.

        Args:
            box_id: Unique identifier obtained from the identifier service.
            title: Initial title; blank or None falls back to the default.

        Returns:
            New box with one pending event.
        """
        box = cls(box_id=box_id, title=normalize_title(title or "") or DEFAULT_BOX_TITLE)
        box._record(BoxProvisioned(box_id=box.box_id, title=box.title))
        return box

    def item(self, item_id: ItemId) -> Item | None:
        """Find an item of this box by identifier."""
        for item in self.items:
            if item.item_id == item_id:
                return item
        return None

    def add_item(self, item_id: ItemId, title: str | None = None) -> Item:
        """Create an item inside this box and record ItemProvisioned.

        Args:
            item_id: Unique identifier obtained from the identifier service.
            title: Initial title; blank or None falls back to the default.

        Returns:
            The new item.

        Raises:
            IdentifierAlreadyRegistered: If the box already holds an item
                with this id.
            ValueError: If the title is too long.
        """
        if self.item(item_id) is not None:
            raise IdentifierAlreadyRegistered(item_id)
        item = Item(
            item_id=item_id,
            box_id=self.box_id,
            title=normalize_title(title or "") or DEFAULT_ITEM_TITLE,
        )
        self.items.append(item)
        self._record(
            ItemProvisioned(box_id=self.box_id, item_id=item_id, title=item.title)
        )
        return item

    def remove_item(self, item_id: ItemId) -> Item:
        """Remove an item and record ItemRemoved.

        Raises:
            KeyError: If the item is not in this box.
        """
        item = self.item(item_id)
        if item is None:
            raise KeyError(item_id)
        self.items.remove(item)
        self._record(ItemRemoved(box_id=self.box_id, item_id=item_id))
        return item

    def change_title(self, title: str) -> None:
        """Rename the box. Records BoxTitleChanged if the title differs.

        Raises:
            ValueError: If the new title is blank or too long.
        """
        new_title = normalize_title(title)
        if not new_title:
            raise ValueError("Box title cannot be empty")
        if new_title == self.title:
            return
        self.title = new_title
        self._record(BoxTitleChanged(box_id=self.box_id, title=new_title))

    def change_item_title(self, item_id: ItemId, title: str) -> None:
        """Rename an item of this box. Records ItemTitleChanged if it differs.

        Raises:
            KeyError: If the item is not in this box.
            ValueError: If the new title is blank or too long.
        """
        item = self.item(item_id)
        if item is None:
            raise KeyError(item_id)
        new_title = normalize_title(title)
        if not new_title:
            raise ValueError("Item title cannot be empty")
        if new_title == item.title:
            return
        item.title = new_title
        self._record(
            ItemTitleChanged(box_id=self.box_id, item_id=item_id, title=new_title)
        )

    def collect_events(self) -> list[DomainEvent]:
        """Return pending events in the order they were recorded and clear them."""
        events = list(self._pending_events)
        self._pending_events.clear()
        return events

    def _record(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def __str__(self) -> str:
        return f"{self.title} ({self.box_id}, {len(self.items)} items)"
