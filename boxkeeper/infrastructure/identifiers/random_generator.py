"""Random identifier generator.

Draws candidates uniformly from the whole signed 64-bit range using the
operating system CSPRNG (``secrets``). With 2**64 values a collision is
rare enough that the unique identifier service almost never retries.
"""

import secrets

from boxkeeper.domain.value_objects.identifiers import MIN_IDENTIFIER


class RandomIdentifierGenerator:
    """Uniform random signed 64-bit candidates. Implements IdentifierGeneratorProtocol."""

    def next(self) -> int:
        """Return a random int in [-2**63, 2**63 - 1]."""
        return secrets.randbits(64) + MIN_IDENTIFIER
