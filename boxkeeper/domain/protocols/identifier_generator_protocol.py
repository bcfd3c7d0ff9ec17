"""Identifier generator protocol.

A generator proposes candidate identifiers; it knows nothing about which
ones are already used. Uniqueness is the job of ``UniqueIdService``.

Implementations:
    - RandomIdentifierGenerator: boxkeeper/infrastructure/identifiers/random_generator.py
    - SequenceIdentifierGenerator: boxkeeper/infrastructure/identifiers/sequence_generator.py
"""

from typing import Protocol


class IdentifierGeneratorProtocol(Protocol):
    """Source of candidate identifier values."""

    def next(self) -> int:
        """Return the next candidate (signed 64-bit int). Never fails."""
        ...
