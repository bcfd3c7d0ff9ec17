"""Transport envelope for domain events.

An envelope is what actually travels through the event transport: a routing
name plus an untyped key/value payload. Typed events convert to and from
envelopes through their own ``to_payload``/``from_payload`` pair, so the
untyped boundary is confined to one pair of functions per event type.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class Envelope:
    """Named payload delivered to subscribers of ``name``.

    Attributes:
        name: Stable routing name of the event type (e.g., "box.provisioned").
        payload: Serialized event fields. Values are JSON-compatible
            primitives, but payloads are not meant to cross processes.
    """

    name: str
    payload: dict[str, Any] = field(default_factory=dict)
