"""Event bus protocol (port) for domain events.

Publishers hand typed events to the bus; subscribers receive typed events.
In between the bus turns events into envelopes and back, so publishers and
subscribers share nothing but the event classes.

Implementations:
    - TypedEventBus: boxkeeper/infrastructure/events/typed_event_bus.py

Usage:
    >>> event_bus.publish(BoxProvisioned(box_id=box.box_id, title=box.title))
    >>>
    >>> def on_box_provisioned(event: BoxProvisioned) -> None:
    ...     print(event.title)
    >>>
    >>> subscription = event_bus.subscribe(BoxProvisioned, on_box_provisioned)
    >>> subscription.dispose()  # No later delivery to on_box_provisioned
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)
from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol

E = TypeVar("E", bound=DomainEvent)

# Handlers are synchronous; deferring work is the execution context's job.
EventHandler = Callable[[Any], None]


class EventBusProtocol(Protocol):
    """Protocol for typed event bus implementations.

    Key Requirements:
        1. **Ordering**: handlers for one event type run in registration
           order, synchronously with ``publish`` unless the subscription
           names a deferred execution context.
        2. **Fail-open**: a handler failure is logged and does not prevent
           delivery to the following handlers.
        3. **Decode isolation**: an envelope that cannot be decoded for one
           subscriber is skipped for that subscriber only.
        4. **No subscribers**: ``publish`` is a no-op, not an error.
    """

    def publish(self, event: DomainEvent) -> None:
        """Publish ``event`` to every subscription for its type.

        Never raises because of handler failures.
        """
        ...

    def subscribe(
        self,
        event_type: type[E],
        handler: Callable[[E], None],
        context: ExecutionContextProtocol | None = None,
    ) -> SubscriptionProtocol:
        """Register ``handler`` for all future events of ``event_type``.

        Args:
            event_type: Concrete event class (routed by its event_name).
            handler: Called with the decoded event.
            context: Where deliveries run (None: inline).

        Returns:
            Subscription handle; dispose it no later than the subscriber's
            own teardown.
        """
        ...
