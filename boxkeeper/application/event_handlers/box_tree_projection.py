"""Box tree projection.

A read model of the box tree kept up to date purely from domain events. It
stands in for a view layer: it never reads the repository, so it shows
exactly what subscribers would see.

Architecture:
    - Application layer (reacts to events, owns no aggregates)
    - Subscribes to all six box/item events on construction
    - Disposes every subscription in ``close()``; after that no handler of
      this projection runs again

Usage:
    >>> with BoxTreeProjection(event_bus) as tree:
    ...     provision_box.handle(ProvisionBox(title="Inbox"))
    ...     tree.boxes()
    [BoxId(value=...)]
"""

import threading
from collections.abc import Sequence

from boxkeeper.domain.events.box_events import (
    BoxProvisioned,
    BoxRemoved,
    BoxTitleChanged,
    ItemProvisioned,
    ItemRemoved,
    ItemTitleChanged,
)
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.execution_context_protocol import (
    ExecutionContextProtocol,
)
from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId


class BoxTreeProjection:
    """Read model mirroring boxes, their items and titles.

    Attributes:
        _box_titles: BoxId -> title, insertion ordered.
        _items: BoxId -> (ItemId -> title), insertion ordered.
        _subscriptions: Handles disposed by ``close()``.
    """

    def __init__(
        self,
        event_bus: EventBusProtocol,
        context: ExecutionContextProtocol | None = None,
    ) -> None:
        """Subscribe to box and item events.

        Args:
            event_bus: Bus to subscribe on.
            context: Delivery context for all handlers (None: inline).
        """
        self._box_titles: dict[BoxId, str] = {}
        self._items: dict[BoxId, dict[ItemId, str]] = {}
        self._lock = threading.Lock()
        self._subscriptions: list[SubscriptionProtocol] = [
            event_bus.subscribe(BoxProvisioned, self._on_box_provisioned, context),
            event_bus.subscribe(BoxRemoved, self._on_box_removed, context),
            event_bus.subscribe(BoxTitleChanged, self._on_box_title_changed, context),
            event_bus.subscribe(ItemProvisioned, self._on_item_provisioned, context),
            event_bus.subscribe(ItemRemoved, self._on_item_removed, context),
            event_bus.subscribe(ItemTitleChanged, self._on_item_title_changed, context),
        ]

    # Queries

    def boxes(self) -> list[BoxId]:
        """Box identifiers in the order they were provisioned."""
        with self._lock:
            return list(self._box_titles)

    def items(self, box_id: BoxId) -> list[ItemId]:
        """Item identifiers of ``box_id`` in insertion order (empty if unknown)."""
        with self._lock:
            return list(self._items.get(box_id, {}))

    def title_of(self, box_id: BoxId, item_id: ItemId | None = None) -> str | None:
        """Title of a box, or of one of its items; None if unknown."""
        with self._lock:
            if item_id is None:
                return self._box_titles.get(box_id)
            return self._items.get(box_id, {}).get(item_id)

    @property
    def subscriptions(self) -> Sequence[SubscriptionProtocol]:
        return tuple(self._subscriptions)

    # Lifecycle

    def close(self) -> None:
        """Dispose all subscriptions. Safe to call more than once."""
        for subscription in self._subscriptions:
            subscription.dispose()

    def __enter__(self) -> "BoxTreeProjection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Event handlers

    def _on_box_provisioned(self, event: BoxProvisioned) -> None:
        with self._lock:
            self._box_titles[event.box_id] = event.title
            self._items.setdefault(event.box_id, {})

    def _on_box_removed(self, event: BoxRemoved) -> None:
        with self._lock:
            self._box_titles.pop(event.box_id, None)
            self._items.pop(event.box_id, None)

    def _on_box_title_changed(self, event: BoxTitleChanged) -> None:
        with self._lock:
            if event.box_id in self._box_titles:
                self._box_titles[event.box_id] = event.title

    def _on_item_provisioned(self, event: ItemProvisioned) -> None:
        with self._lock:
            if event.box_id in self._items:
                self._items[event.box_id][event.item_id] = event.title

    def _on_item_removed(self, event: ItemRemoved) -> None:
        with self._lock:
            self._items.get(event.box_id, {}).pop(event.item_id, None)

    def _on_item_title_changed(self, event: ItemTitleChanged) -> None:
        with self._lock:
            items = self._items.get(event.box_id, {})
            if event.item_id in items:
                items[event.item_id] = event.title
