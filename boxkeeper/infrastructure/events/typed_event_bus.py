"""Typed event bus.

Implements EventBusProtocol on top of an envelope transport:

    publish:   event --to_envelope()--> Envelope --transport--> subscribers
    subscribe: Envelope --event_type.from_envelope()--> event --> handler

Each subscription decodes the envelope into its own event type. An envelope
that does not decode is logged and skipped for that subscription only; the
publisher and the other subscriptions are unaffected. Handler failures are
isolated by the transport.

Usage:
    >>> bus = TypedEventBus(transport=InMemoryEnvelopeTransport(logger), logger=logger)
    >>> subscription = bus.subscribe(BoxProvisioned, on_box_provisioned)
    >>> bus.publish(BoxProvisioned(box_id=BoxId(1), title="Inbox"))
    >>> subscription.dispose()
"""

from collections.abc import Callable
from typing import TypeVar

from boxkeeper.domain.errors import EnvelopeDeserializationFailed
from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.events.envelope import Envelope
from boxkeeper.domain.protocols.envelope_transport_protocol import (
    EnvelopeTransportProtocol,
)
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol

E = TypeVar("E", bound=DomainEvent)


class TypedEventBus:
    """Event bus translating typed events to and from envelopes.

    Attributes:
        _transport: Envelope transport doing the actual delivery.
        _logger: Logger for publishing and decode failures.
    """

    def __init__(self, transport: EnvelopeTransportProtocol, logger: LoggerProtocol) -> None:
        """Initialize event bus.

        Args:
            transport: Envelope transport (named-channel publish/subscribe).
            logger: Logger for publishing (debug) and decode failures (warning).
        """
        self._transport = transport
        self._logger = logger

    def publish(self, event: DomainEvent) -> None:
        """Serialize ``event`` and hand it to the transport.

        No subscribers = no-op. Handler failures are never raised here.
        """
        envelope = event.to_envelope()
        self._logger.debug(
            "event_publishing",
            event_type=type(event).__name__,
            event_name=envelope.name,
            event_id=str(event.event_id),
        )
        self._transport.publish(envelope)

    def subscribe(
        self,
        event_type: type[E],
        handler: Callable[[E], None],
        context: ExecutionContextProtocol | None = None,
    ) -> SubscriptionProtocol:
        """Register ``handler`` for future events of ``event_type``.

        Args:
            event_type: Concrete DomainEvent subclass with an event_name.
            handler: Called with each decoded event.
            context: Delivery context (None: inline with ``publish``).

        Returns:
            Subscription handle.

        Raises:
            TypeError: If ``event_type`` is not a named DomainEvent subclass.
        """
        if not (isinstance(event_type, type) and issubclass(event_type, DomainEvent)):
            raise TypeError(f"{event_type!r} is not a DomainEvent subclass")
        if not event_type.event_name:
            raise TypeError(f"{event_type.__name__} does not declare an event_name")

        def on_envelope(envelope: Envelope) -> None:
            try:
                event = event_type.from_envelope(envelope)
            except EnvelopeDeserializationFailed as e:
                self._logger.warning(
                    "event_deserialization_failed",
                    event_type=event_type.__name__,
                    event_name=e.event_name,
                    reason=e.reason,
                    handler_name=getattr(handler, "__name__", repr(handler)),
                )
                return
            handler(event)

        return self._transport.subscribe(event_type.event_name, on_envelope, context=context)
