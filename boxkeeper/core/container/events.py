"""Event bus factory.

Builds the transport and the typed event bus, then subscribes the logging
handler to every event in EVENT_REGISTRY (registry-driven wiring: adding an
event to the registry is enough to get it logged).
"""

from typing import TYPE_CHECKING

from boxkeeper.core.config import Settings

if TYPE_CHECKING:
    from boxkeeper.domain.protocols.envelope_transport_protocol import (
        EnvelopeTransportProtocol,
    )
    from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
    from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
    from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol


def create_event_bus(
    settings: Settings, logger: "LoggerProtocol"
) -> tuple["EnvelopeTransportProtocol", "EventBusProtocol", list["SubscriptionProtocol"]]:
    """Create transport and event bus per EVENT_BUS_TYPE.

    Returns correct adapter based on EVENT_BUS_TYPE:
        - 'in-memory': InMemoryEnvelopeTransport

    Args:
        settings: Application settings.
        logger: Logger shared by transport, bus and the logging handler.

    Returns:
        Transport, event bus and the logging handler's subscriptions.

    Raises:
        ValueError: Unsupported event bus type.
    """
    from boxkeeper.domain.events.registry import EVENT_REGISTRY
    from boxkeeper.infrastructure.events import InMemoryEnvelopeTransport, TypedEventBus
    from boxkeeper.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )

    if settings.event_bus_type == "in-memory":
        transport = InMemoryEnvelopeTransport(logger=logger)
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {settings.event_bus_type}. "
            f"Supported: 'in-memory'"
        )

    event_bus = TypedEventBus(transport=transport, logger=logger)

    logging_handler = LoggingEventHandler(logger=logger)
    subscriptions = [
        event_bus.subscribe(metadata.event_class, logging_handler.handle)
        for metadata in EVENT_REGISTRY
    ]

    return transport, event_bus, subscriptions
