"""Exceptions raised by identifier generation, persistence and event decoding.

Every exception carries a machine-readable ``ErrorCode`` so the application
layer can translate it into a ``BoxError`` value without string matching.
"""

from typing import Any

from boxkeeper.core.enums import ErrorCode


class BoxkeeperError(Exception):
    """Base exception for boxkeeper operations."""

    code: ErrorCode = ErrorCode.VALIDATION_FAILED


class IdentifierSpaceExhausted(BoxkeeperError):
    """No free identifier found within the configured number of attempts.

    Fatal to the calling operation only. Callers usually surface it as a
    "try again" failure.

    Attributes:
        identifier_kind: Name of the identifier type (e.g., "BoxId").
        attempts: Number of candidates that were all reported taken.
    """

    code = ErrorCode.IDENTIFIER_SPACE_EXHAUSTED

    def __init__(self, identifier_kind: str, attempts: int) -> None:
        self.identifier_kind = identifier_kind
        self.attempts = attempts
        super().__init__(
            f"No free {identifier_kind} found after {attempts} attempt(s)"
        )


class PredicateFailure(BoxkeeperError):
    """The "is taken" check itself failed (e.g., store unreachable).

    The original exception is chained as ``__cause__``. A failed check is
    never interpreted as "identifier is free".

    Attributes:
        identifier: Candidate identifier that was being checked.
    """

    code = ErrorCode.IDENTIFIER_CHECK_FAILED

    def __init__(self, identifier: Any, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Could not check identifier {identifier!r}: {reason}")


class IdentifierAlreadyRegistered(BoxkeeperError):
    """Registration found the identifier already stored.

    Raised by repositories as the final uniqueness guard, covering the race
    where two callers observed the same candidate as free.

    Attributes:
        identifier: The duplicate identifier.
    """

    code = ErrorCode.IDENTIFIER_ALREADY_REGISTERED

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"Identifier {identifier!r} is already registered")


class EnvelopeDeserializationFailed(BoxkeeperError):
    """An envelope payload does not match the shape its event type expects.

    The event bus catches this per subscription, logs it and skips delivery
    to that subscriber only.

    Attributes:
        event_name: Envelope name that was being decoded.
        reason: Short description of the mismatch.
    """

    code = ErrorCode.ENVELOPE_DESERIALIZATION_FAILED

    def __init__(self, event_name: str, reason: str) -> None:
        self.event_name = event_name
        self.reason = reason
        super().__init__(f"Cannot decode envelope {event_name!r}: {reason}")
