"""Identifier generator adapters."""

from boxkeeper.infrastructure.identifiers.random_generator import (
    RandomIdentifierGenerator,
)
from boxkeeper.infrastructure.identifiers.sequence_generator import (
    SequenceIdentifierGenerator,
)

__all__ = [
    "RandomIdentifierGenerator",
    "SequenceIdentifierGenerator",
]
