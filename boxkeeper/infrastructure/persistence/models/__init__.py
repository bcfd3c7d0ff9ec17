"""Database models.

Both models are imported here so relationship targets resolve and
``BaseModel.metadata`` knows every table.
"""

from boxkeeper.infrastructure.persistence.models.box import BoxModel
from boxkeeper.infrastructure.persistence.models.item import ItemModel

__all__ = [
    "BoxModel",
    "ItemModel",
]
