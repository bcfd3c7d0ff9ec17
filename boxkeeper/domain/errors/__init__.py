"""Domain errors.

Two flavours, following the railway-oriented split:
    - Exceptions (``BoxkeeperError`` subclasses) raised by domain services
      and adapters when an operation cannot continue.
    - Error values (``BoxError``) returned inside ``Failure`` results by
      application handlers.
"""

from boxkeeper.domain.errors.box_error import BoxError
from boxkeeper.domain.errors.exceptions import (
    BoxkeeperError,
    EnvelopeDeserializationFailed,
    IdentifierAlreadyRegistered,
    IdentifierSpaceExhausted,
    PredicateFailure,
)

__all__ = [
    "BoxError",
    "BoxkeeperError",
    "EnvelopeDeserializationFailed",
    "IdentifierAlreadyRegistered",
    "IdentifierSpaceExhausted",
    "PredicateFailure",
]
