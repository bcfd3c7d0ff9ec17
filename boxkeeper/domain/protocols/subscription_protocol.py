"""Subscription handle protocol."""

from typing import Protocol

from boxkeeper.domain.enums import SubscriptionState


class SubscriptionProtocol(Protocol):
    """Live registration of a handler with the event transport.

    ``dispose()`` is idempotent. After it returns no new delivery to the
    handler starts; a delivery already running is allowed to finish.
    """

    @property
    def state(self) -> SubscriptionState:
        """Current lifecycle state."""
        ...

    def dispose(self) -> None:
        """Unregister the handler (ACTIVE -> DISPOSED)."""
        ...
