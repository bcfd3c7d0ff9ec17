"""Domain events and their transport envelope."""

from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.events.box_events import (
    BoxProvisioned,
    BoxRemoved,
    BoxTitleChanged,
    ItemProvisioned,
    ItemRemoved,
    ItemTitleChanged,
)
from boxkeeper.domain.events.envelope import Envelope

__all__ = [
    "BoxProvisioned",
    "BoxRemoved",
    "BoxTitleChanged",
    "DomainEvent",
    "Envelope",
    "ItemProvisioned",
    "ItemRemoved",
    "ItemTitleChanged",
]
