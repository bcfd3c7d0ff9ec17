"""Box repository implementations."""

from boxkeeper.infrastructure.persistence.repositories.box_repository import (
    SqlBoxRepository,
)
from boxkeeper.infrastructure.persistence.repositories.in_memory_box_repository import (
    InMemoryBoxRepository,
)

__all__ = [
    "InMemoryBoxRepository",
    "SqlBoxRepository",
]
