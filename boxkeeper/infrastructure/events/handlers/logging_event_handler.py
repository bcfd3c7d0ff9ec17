"""Logging event handler for domain events.

Writes one structured INFO log line per domain event. The container
subscribes ``handle`` to every event in EVENT_REGISTRY.

Structured Fields:
    - event_type: Event class name (e.g., "BoxProvisioned")
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - payload fields (box_id, item_id, title)
"""

from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Example:
        >>> handler = LoggingEventHandler(logger=logger)
        >>> event_bus.subscribe(BoxProvisioned, handler.handle)
        >>> event_bus.publish(BoxProvisioned(box_id=BoxId(1), title="Inbox"))
        >>> # Log output: {"event": "box.provisioned", "box_id": 1, "title": "Inbox", ...}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def handle(self, event: DomainEvent) -> None:
        """Log any domain event (INFO level)."""
        context = event.to_payload()
        context.pop("event_id", None)
        context.pop("occurred_at", None)
        self._logger.info(
            event.event_name,
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            **context,
        )
