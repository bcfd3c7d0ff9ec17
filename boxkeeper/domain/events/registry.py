"""Domain Events Registry - Single Source of Truth.

Catalogs every domain event with its routing name. Used for:
- Container wiring (logging handler subscribes to every registered event)
- Decoding envelopes by name
- Compliance tests (unique names, round-trip law for every event)

Adding new events:
1. Define the event dataclass in the appropriate *_events.py file
2. Add it to EVENT_REGISTRY below
3. Run tests - they check naming and serialization for every entry
"""

from dataclasses import dataclass
from enum import Enum

from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.events.box_events import (
    BoxProvisioned,
    BoxRemoved,
    BoxTitleChanged,
    ItemProvisioned,
    ItemRemoved,
    ItemTitleChanged,
)


class EventCategory(str, Enum):
    """Event categories for grouping."""

    BOX = "box"
    ITEM = "item"


@dataclass(frozen=True, slots=True, kw_only=True)
class EventMetadata:
    """Registry entry for one event type.

    Attributes:
        event_class: Event dataclass.
        category: Grouping category.
        description: One-line description for logs and docs.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    description: str

    @property
    def name(self) -> str:
        """Routing name of the event type."""
        return self.event_class.event_name


EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=BoxProvisioned,
        category=EventCategory.BOX,
        description="Box created and registered",
    ),
    EventMetadata(
        event_class=BoxRemoved,
        category=EventCategory.BOX,
        description="Box and its items removed",
    ),
    EventMetadata(
        event_class=BoxTitleChanged,
        category=EventCategory.BOX,
        description="Box renamed",
    ),
    EventMetadata(
        event_class=ItemProvisioned,
        category=EventCategory.ITEM,
        description="Item created inside a box",
    ),
    EventMetadata(
        event_class=ItemRemoved,
        category=EventCategory.ITEM,
        description="Item removed from its box",
    ),
    EventMetadata(
        event_class=ItemTitleChanged,
        category=EventCategory.ITEM,
        description="Item renamed",
    ),
]


def get_all_events() -> list[type[DomainEvent]]:
    """Return every registered event class in registry order."""
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_event_type(name: str) -> type[DomainEvent]:
    """Look up an event class by routing name.

    Args:
        name: Envelope/event name (e.g., "box.provisioned").

    Returns:
        Registered event class.

    Raises:
        KeyError: If no event with that name is registered.
    """
    for meta in EVENT_REGISTRY:
        if meta.name == name:
            return meta.event_class
    raise KeyError(name)


def get_events_by_category(category: EventCategory) -> list[type[DomainEvent]]:
    """Return registered event classes in one category."""
    return [meta.event_class for meta in EVENT_REGISTRY if meta.category == category]
