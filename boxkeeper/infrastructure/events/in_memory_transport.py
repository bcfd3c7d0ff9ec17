"""In-memory envelope transport.

Implements EnvelopeTransportProtocol with a dictionary of named channels.
Suitable for a single process; publishers and subscribers share memory.

Architecture:
    - Channel registry: name -> subscriptions in registration order
    - Registry guarded by a lock; ``publish`` takes a snapshot and delivers
      outside the lock, so handlers may subscribe or dispose freely
    - Fail-open: each delivery is isolated; failures are logged and the
      next subscription still receives the envelope (also when a context
      refuses the submission, e.g. a closed event loop)
    - Deferred contexts get a delivery closure that re-checks subscription
      state when it finally runs
"""

import threading
from collections import defaultdict
from functools import partial

from boxkeeper.domain.events.envelope import Envelope
from boxkeeper.domain.protocols.envelope_transport_protocol import EnvelopeCallback
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.infrastructure.events.subscription import Subscription


class InMemoryEnvelopeTransport:
    """In-memory named-channel transport with fail-open delivery.

    Thread Safety:
        - ``publish``, ``subscribe`` and ``dispose`` may be called from any
          thread
        - Inline deliveries run on the publishing thread

    Attributes:
        _channels: Channel name -> active subscriptions (registration order).
        _logger: Logger for delivery failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize transport with logger.

        Args:
            logger: Logger for delivery failures (warning level) and
                publishing (debug level).
        """
        self._channels: dict[str, list[Subscription]] = defaultdict(list)
        self._lock = threading.Lock()
        self._logger = logger

    def subscribe(
        self,
        name: str,
        callback: EnvelopeCallback,
        context: ExecutionContextProtocol | None = None,
    ) -> Subscription:
        """Register ``callback`` on channel ``name``.

        Args:
            name: Channel name.
            callback: Called with every envelope published on the channel.
            context: Delivery context (None: inline with ``publish``).

        Returns:
            Active subscription.

        Notes:
            - No duplicate detection (same callback can be registered twice)
        """
        subscription = Subscription(
            name=name,
            callback=callback,
            context=context,
            on_dispose=self._remove,
        )
        with self._lock:
            self._channels[name].append(subscription)
        return subscription

    def publish(self, envelope: Envelope) -> None:
        """Deliver ``envelope`` to every subscription on its channel.

        Flow:
            1. Snapshot subscriptions for ``envelope.name``
            2. If none, return immediately (no-op)
            3. Deliver inline, or submit to the subscription's context
            4. Log failures per subscription and continue

        Never raises because of a callback or context failure.
        """
        with self._lock:
            subscriptions = list(self._channels.get(envelope.name, ()))

        if not subscriptions:
            return

        self._logger.debug(
            "envelope_publishing",
            envelope_name=envelope.name,
            subscription_count=len(subscriptions),
        )

        for subscription in subscriptions:
            if subscription.context is None:
                self._deliver(subscription, envelope)
                continue
            try:
                subscription.context.submit(partial(self._deliver, subscription, envelope))
            except Exception as e:
                self._log_failure("event_submit_failed", subscription, envelope, e)

    def subscription_count(self, name: str) -> int:
        """Number of active subscriptions on a channel."""
        with self._lock:
            return len(self._channels.get(name, ()))

    def _deliver(self, subscription: Subscription, envelope: Envelope) -> None:
        try:
            subscription.deliver(envelope)
        except Exception as e:
            self._log_failure("event_handler_failed", subscription, envelope, e)

    def _log_failure(
        self,
        message: str,
        subscription: Subscription,
        envelope: Envelope,
        e: Exception,
    ) -> None:
        self._logger.warning(
            message,
            envelope_name=envelope.name,
            subscription=repr(subscription),
            error_type=type(e).__name__,
            error_message=str(e),
            exc_info=e,
        )

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            channel = self._channels.get(subscription.name)
            if channel is None:
                return
            try:
                channel.remove(subscription)
            except ValueError:
                return
            if not channel:
                del self._channels[subscription.name]
