"""Subscription handle for the in-memory envelope transport.

State machine:
    ACTIVE --dispose()--> DISPOSED   (terminal, idempotent)

Disposal is a barrier against future deliveries. Each subscription owns a
re-entrant lock held for the whole of every delivery. ``dispose()`` takes
the same lock, so:

    - a delivery already running when ``dispose()`` is called finishes first
    - no delivery starts after ``dispose()`` returned
    - a handler may dispose its own subscription (same thread, re-entrant)
"""

import threading
from collections.abc import Callable

from boxkeeper.domain.enums import SubscriptionState
from boxkeeper.domain.events.envelope import Envelope
from boxkeeper.domain.protocols.envelope_transport_protocol import EnvelopeCallback
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)


class Subscription:
    """Registration of one callback on one channel.

    Attributes:
        name: Channel (event) name.
        context: Execution context for deliveries, or None for inline.
    """

    def __init__(
        self,
        name: str,
        callback: EnvelopeCallback,
        context: ExecutionContextProtocol | None,
        on_dispose: Callable[["Subscription"], None],
    ) -> None:
        """Initialize an active subscription.

        Args:
            name: Channel name.
            callback: Envelope callback.
            context: Delivery context (None: inline).
            on_dispose: Called once, under the subscription lock, to remove
                the subscription from its channel.
        """
        self.name = name
        self.context = context
        self._callback = callback
        self._on_dispose = on_dispose
        self._state = SubscriptionState.ACTIVE
        self._lock = threading.RLock()

    @property
    def state(self) -> SubscriptionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SubscriptionState.ACTIVE

    def deliver(self, envelope: Envelope) -> bool:
        """Run the callback unless the subscription is disposed.

        Callback exceptions propagate to the transport.

        Returns:
            True if the callback ran, False if skipped.
        """
        with self._lock:
            if self._state is SubscriptionState.DISPOSED:
                return False
            self._callback(envelope)
            return True

    def dispose(self) -> None:
        """Unregister (ACTIVE -> DISPOSED). Safe to call more than once."""
        with self._lock:
            if self._state is SubscriptionState.DISPOSED:
                return
            self._state = SubscriptionState.DISPOSED
            self._on_dispose(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def __repr__(self) -> str:
        context_name = self.context.name if self.context is not None else "inline"
        return (
            f"Subscription(name={self.name!r}, state={self._state.value}, "
            f"context={context_name!r})"
        )
