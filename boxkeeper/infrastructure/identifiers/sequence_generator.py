"""Deterministic identifier generator.

Returns a programmed sequence of candidates and then repeats the last one
forever. With two values the first call returns A and every later call
returns B, which makes the identifier retry loop testable:

    >>> generator = SequenceIdentifierGenerator(1234, 5678)
    >>> [generator.next() for _ in range(3)]
    [1234, 5678, 5678]
"""


class SequenceIdentifierGenerator:
    """Pre-programmed candidates. Implements IdentifierGeneratorProtocol.

    Attributes:
        call_count: Number of ``next()`` calls so far.
    """

    def __init__(self, first: int, *rest: int) -> None:
        """Initialize with at least one value.

        Args:
            first: Value returned by the first call.
            *rest: Values returned by following calls; the last one repeats.
        """
        self._values = (first, *rest)
        self.call_count = 0

    def next(self) -> int:
        """Return the next programmed value."""
        index = min(self.call_count, len(self._values) - 1)
        self.call_count += 1
        return self._values[index]
