"""Domain value objects."""

from boxkeeper.domain.value_objects.identifiers import (
    MAX_IDENTIFIER,
    MIN_IDENTIFIER,
    BoxId,
    Identifier,
    ItemId,
)

__all__ = [
    "MAX_IDENTIFIER",
    "MIN_IDENTIFIER",
    "BoxId",
    "Identifier",
    "ItemId",
]
