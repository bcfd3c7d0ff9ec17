"""Envelope transport protocol (port).

The transport moves untyped envelopes between publishers and subscribers
on named channels. The typed event bus sits on top of it.

Implementations:
    - InMemoryEnvelopeTransport: boxkeeper/infrastructure/events/in_memory_transport.py
"""

from collections.abc import Callable
from typing import Protocol

from boxkeeper.domain.events.envelope import Envelope
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)
from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol

EnvelopeCallback = Callable[[Envelope], None]


class EnvelopeTransportProtocol(Protocol):
    """Named-channel publish/subscribe for envelopes.

    Key Requirements:
        1. Callbacks on one channel run in registration order.
        2. A failing callback does not stop delivery to the next one.
        3. Publishing on a channel without subscribers is a no-op.
    """

    def publish(self, envelope: Envelope) -> None:
        """Deliver ``envelope`` to every subscription on ``envelope.name``."""
        ...

    def subscribe(
        self,
        name: str,
        callback: EnvelopeCallback,
        context: ExecutionContextProtocol | None = None,
    ) -> SubscriptionProtocol:
        """Register ``callback`` for envelopes named ``name``.

        Args:
            name: Channel name.
            callback: Called with each envelope.
            context: Where deliveries run. None means inline, synchronously
                with ``publish``.

        Returns:
            Disposable subscription handle.
        """
        ...
