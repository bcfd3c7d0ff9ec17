"""Typed entity identifiers.

Every entity kind has its own identifier type. All of them wrap a signed
64-bit integer, but they are nominally distinct: a ``BoxId(7)`` is never
equal to an ``ItemId(7)``, and type checkers reject passing one where the
other is expected.

Usage:
    >>> box_id = BoxId(1234)
    >>> box_id == BoxId(1234)
    True
    >>> box_id == ItemId(1234)
    False
    >>> int(box_id)
    1234
"""

from dataclasses import dataclass

MIN_IDENTIFIER = -(2**63)
MAX_IDENTIFIER = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Identifier:
    """Base identifier value object (signed 64-bit integer).

    Equality compares the concrete class as well as the value, so identifiers
    of different entity kinds never compare equal.

    Attributes:
        value: Raw integer value.

    Raises:
        TypeError: If value is not an int (bool is rejected).
        ValueError: If value is outside the signed 64-bit range.
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the raw value."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} requires an int, got {type(self.value).__name__}"
            )
        if not MIN_IDENTIFIER <= self.value <= MAX_IDENTIFIER:
            raise ValueError(
                f"{type(self).__name__} value {self.value} is outside the 64-bit range"
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class BoxId(Identifier):
    """Identifier of a Box aggregate."""


@dataclass(frozen=True, slots=True)
class ItemId(Identifier):
    """Identifier of an Item inside a Box."""
