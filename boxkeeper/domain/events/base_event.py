"""Base domain event class.

Domain events represent "things that happened" and are named in past tense
(BoxProvisioned, ItemTitleChanged). They carry exactly the data subscribers
need to react without re-querying the repository.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID v7) and occurred_at (UTC)
    - Stable routing name per concrete event (``event_name``)
    - Each event owns its serialize/deserialize pair
      (``to_payload``/``from_payload``)

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class BoxRemoved(DomainEvent):
    ...     event_name: ClassVar[str] = "box.removed"
    ...     box_id: BoxId
    ...
    ...     def to_payload(self) -> dict[str, Any]:
    ...         return {**self.metadata_payload(), "box_id": self.box_id.value}
    ...
    ...     @classmethod
    ...     def from_payload(cls, payload):
    ...         return cls(
    ...             **cls.metadata_from_payload(payload),
    ...             box_id=BoxId(payload_int(payload, "box_id")),
    ...         )
    >>>
    >>> event = BoxRemoved(box_id=BoxId(1))
    >>> BoxRemoved.from_envelope(event.to_envelope()) == event
    True
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar, Self
from uuid import UUID

from uuid_extensions import uuid7

from boxkeeper.domain.errors import EnvelopeDeserializationFailed
from boxkeeper.domain.events.envelope import Envelope


def payload_int(payload: Mapping[str, Any], key: str) -> int:
    """Read a required int field from a payload.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not an int (bool is rejected).
    """
    value = payload[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an int, got {type(value).__name__}")
    return value


def payload_str(payload: Mapping[str, Any], key: str) -> str:
    """Read a required str field from a payload.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not a str.
    """
    value = payload[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a str, got {type(value).__name__}")
    return value


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Concrete events MUST:
        1. Use past tense naming (BoxProvisioned, NOT ProvisionBox)
        2. Be frozen, keyword-only dataclasses
        3. Declare a unique ``event_name`` used for routing
        4. Implement ``to_payload`` and ``from_payload``

    Attributes:
        event_id: Unique identifier for this event instance (UUID v7).
        occurred_at: When the fact occurred (UTC).
    """

    event_name: ClassVar[str] = ""

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def metadata_payload(self) -> dict[str, Any]:
        """Serialize the fields every event shares."""
        return {
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
        }

    @classmethod
    def metadata_from_payload(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Decode the shared fields into constructor keyword arguments."""
        return {
            "event_id": UUID(payload_str(payload, "event_id")),
            "occurred_at": datetime.fromisoformat(payload_str(payload, "occurred_at")),
        }

    def to_payload(self) -> dict[str, Any]:
        """Serialize this event into an envelope payload.

        Returns:
            Dictionary of JSON-compatible primitives.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement to_payload")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Rebuild an event from an envelope payload.

        Implementations may raise KeyError, TypeError or ValueError on
        malformed payloads; ``from_envelope`` converts those.
        """
        raise NotImplementedError(f"{cls.__name__} must implement from_payload")

    def to_envelope(self) -> Envelope:
        """Wrap this event for the transport.

        Returns:
            Envelope named after the event type.
        """
        return Envelope(name=self.event_name, payload=self.to_payload())

    @classmethod
    def from_envelope(cls, envelope: Envelope) -> Self:
        """Decode an envelope into an instance of this event type.

        Args:
            envelope: Envelope received from the transport.

        Returns:
            Event instance equal (field-wise) to the one that was published.

        Raises:
            EnvelopeDeserializationFailed: Name mismatch or malformed payload.
        """
        if envelope.name != cls.event_name:
            raise EnvelopeDeserializationFailed(
                envelope.name, f"expected envelope named {cls.event_name!r}"
            )
        try:
            return cls.from_payload(envelope.payload)
        except EnvelopeDeserializationFailed:
            raise
        except KeyError as e:
            raise EnvelopeDeserializationFailed(
                envelope.name, f"missing field {e.args[0]!r}"
            ) from e
        except (TypeError, ValueError) as e:
            raise EnvelopeDeserializationFailed(envelope.name, str(e)) from e
