"""Domain entities."""

from boxkeeper.domain.entities.box import DEFAULT_BOX_TITLE, Box
from boxkeeper.domain.entities.item import DEFAULT_ITEM_TITLE, Item

__all__ = [
    "DEFAULT_BOX_TITLE",
    "DEFAULT_ITEM_TITLE",
    "Box",
    "Item",
]
