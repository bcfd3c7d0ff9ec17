"""Item domain entity.

An item always lives inside exactly one box. Application code never builds
items directly; ``Box.add_item`` is the only creation path. Repositories
construct items when rebuilding a stored box.
"""

from dataclasses import dataclass

from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId

DEFAULT_ITEM_TITLE = "New Item"
MAX_TITLE_LENGTH = 255


def normalize_title(title: str) -> str:
    """Strip surrounding whitespace and validate length.

    Args:
        title: Raw title.

    Returns:
        Stripped title (may be empty).

    Raises:
        ValueError: If the stripped title exceeds MAX_TITLE_LENGTH.
    """
    stripped = title.strip()
    if len(stripped) > MAX_TITLE_LENGTH:
        raise ValueError(f"Title cannot exceed {MAX_TITLE_LENGTH} characters")
    return stripped


@dataclass
class Item:
    """Child entity of a box.

    Attributes:
        item_id: Identifier, assigned once at creation.
        box_id: Owning box, fixed for the item's lifetime.
        title: Display title.
    """

    item_id: ItemId
    box_id: BoxId
    title: str = DEFAULT_ITEM_TITLE

    def __post_init__(self) -> None:
        """Validate item after initialization.

        Raises:
            TypeError: If identifiers have the wrong kind.
            ValueError: If title is empty or too long.
        """
        if not isinstance(self.item_id, ItemId):
            raise TypeError("Item.item_id must be an ItemId")
        if not isinstance(self.box_id, BoxId):
            raise TypeError("Item.box_id must be a BoxId")
        self.title = normalize_title(self.title)
        if not self.title:
            raise ValueError("Item title cannot be empty")

    def __str__(self) -> str:
        return f"{self.title} ({self.item_id})"
