"""Event transport, execution contexts and the typed event bus.

Usage:
    >>> from boxkeeper.infrastructure.events import (
    ...     InMemoryEnvelopeTransport,
    ...     TypedEventBus,
    ... )
    >>>
    >>> transport = InMemoryEnvelopeTransport(logger=logger)
    >>> event_bus = TypedEventBus(transport=transport, logger=logger)
"""

from boxkeeper.infrastructure.events.execution_contexts import (
    AsyncioLoopContext,
    QueueExecutionContext,
    SynchronousContext,
)
from boxkeeper.infrastructure.events.in_memory_transport import InMemoryEnvelopeTransport
from boxkeeper.infrastructure.events.subscription import Subscription
from boxkeeper.infrastructure.events.typed_event_bus import TypedEventBus

__all__ = [
    "AsyncioLoopContext",
    "InMemoryEnvelopeTransport",
    "QueueExecutionContext",
    "Subscription",
    "SynchronousContext",
    "TypedEventBus",
]
