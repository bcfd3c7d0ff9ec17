"""Domain ports (structural protocols implemented by adapters)."""

from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.envelope_transport_protocol import (
    EnvelopeCallback,
    EnvelopeTransportProtocol,
)
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)
from boxkeeper.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol

__all__ = [
    "BoxRepository",
    "EnvelopeCallback",
    "EnvelopeTransportProtocol",
    "EventBusProtocol",
    "EventHandler",
    "ExecutionContextProtocol",
    "IdentifierGeneratorProtocol",
    "LoggerProtocol",
    "SubscriptionProtocol",
]
