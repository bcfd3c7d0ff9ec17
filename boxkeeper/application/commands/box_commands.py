"""Box commands (CQRS write operations).

Commands represent user intent to change the box tree.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass

from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId


@dataclass(frozen=True, kw_only=True)
class ProvisionBox:
    """Create a new box with a freshly generated identifier.

    Attributes:
        title: Initial title. None or blank uses the default ("New Box").

    Example:
        >>> result = handler.handle(ProvisionBox(title="Groceries"))
    """

    title: str | None = None


@dataclass(frozen=True, kw_only=True)
class ProvisionItem:
    """Create a new item inside an existing box.

    Attributes:
        box_id: Box receiving the item.
        title: Initial title. None or blank uses the default ("New Item").

    Example:
        >>> result = handler.handle(ProvisionItem(box_id=box.box_id, title="Milk"))
    """

    box_id: BoxId
    title: str | None = None


@dataclass(frozen=True, kw_only=True)
class RemoveBox:
    """Remove a box together with all of its items.

    Attributes:
        box_id: Box to remove.
    """

    box_id: BoxId


@dataclass(frozen=True, kw_only=True)
class RemoveItem:
    """Remove one item from its box.

    Attributes:
        box_id: Owning box.
        item_id: Item to remove.
    """

    box_id: BoxId
    item_id: ItemId


@dataclass(frozen=True, kw_only=True)
class ChangeBoxTitle:
    """Rename a box.

    Attributes:
        box_id: Box to rename.
        title: New title (must not be blank).
    """

    box_id: BoxId
    title: str


@dataclass(frozen=True, kw_only=True)
class ChangeItemTitle:
    """Rename an item.

    Attributes:
        box_id: Owning box.
        item_id: Item to rename.
        title: New title (must not be blank).
    """

    box_id: BoxId
    item_id: ItemId
    title: str
