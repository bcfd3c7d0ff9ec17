"""Box and item domain events.

Six facts about the box tree, each with a stable routing name:

    box.provisioned            BoxProvisioned
    box.removed                BoxRemoved
    box.title_changed          BoxTitleChanged
    box.item.provisioned       ItemProvisioned
    box.item.removed           ItemRemoved
    box.item.title_changed     ItemTitleChanged

Removing a box does not emit ItemRemoved for its items; subscribers treat
BoxRemoved as covering the box's children.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from boxkeeper.domain.events.base_event import DomainEvent, payload_int, payload_str
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId


@dataclass(frozen=True, kw_only=True, slots=True)
class BoxProvisioned(DomainEvent):
    """A new box was created and registered.

    Attributes:
        box_id: Identifier of the new box.
        title: Initial title.
    """

    event_name: ClassVar[str] = "box.provisioned"

    box_id: BoxId
    title: str

    def to_payload(self) -> dict[str, Any]:
        return {
            **self.metadata_payload(),
            "box_id": self.box_id.value,
            "title": self.title,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            **cls.metadata_from_payload(payload),
            box_id=BoxId(payload_int(payload, "box_id")),
            title=payload_str(payload, "title"),
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class BoxRemoved(DomainEvent):
    """A box and all of its items were removed.

    Attributes:
        box_id: Identifier of the removed box.
    """

    event_name: ClassVar[str] = "box.removed"

    box_id: BoxId

    def to_payload(self) -> dict[str, Any]:
        return {**self.metadata_payload(), "box_id": self.box_id.value}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            **cls.metadata_from_payload(payload),
            box_id=BoxId(payload_int(payload, "box_id")),
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class BoxTitleChanged(DomainEvent):
    """A box was renamed.

    Attributes:
        box_id: Identifier of the renamed box.
        title: New title.
    """

    event_name: ClassVar[str] = "box.title_changed"

    box_id: BoxId
    title: str

    def to_payload(self) -> dict[str, Any]:
        return {
            **self.metadata_payload(),
            "box_id": self.box_id.value,
            "title": self.title,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            **cls.metadata_from_payload(payload),
            box_id=BoxId(payload_int(payload, "box_id")),
            title=payload_str(payload, "title"),
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class ItemProvisioned(DomainEvent):
    """A new item was created inside a box.

    Attributes:
        box_id: Owning box.
        item_id: Identifier of the new item.
        title: Initial title.
    """

    event_name: ClassVar[str] = "box.item.provisioned"

    box_id: BoxId
    item_id: ItemId
    title: str

    def to_payload(self) -> dict[str, Any]:
        return {
            **self.metadata_payload(),
            "box_id": self.box_id.value,
            "item_id": self.item_id.value,
            "title": self.title,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            **cls.metadata_from_payload(payload),
            box_id=BoxId(payload_int(payload, "box_id")),
            item_id=ItemId(payload_int(payload, "item_id")),
            title=payload_str(payload, "title"),
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class ItemRemoved(DomainEvent):
    """An item was removed from its box.

    Attributes:
        box_id: Owning box.
        item_id: Identifier of the removed item.
    """

    event_name: ClassVar[str] = "box.item.removed"

    box_id: BoxId
    item_id: ItemId

    def to_payload(self) -> dict[str, Any]:
        return {
            **self.metadata_payload(),
            "box_id": self.box_id.value,
            "item_id": self.item_id.value,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            **cls.metadata_from_payload(payload),
            box_id=BoxId(payload_int(payload, "box_id")),
            item_id=ItemId(payload_int(payload, "item_id")),
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class ItemTitleChanged(DomainEvent):
    """An item was renamed.

    Attributes:
        box_id: Owning box.
        item_id: Identifier of the renamed item.
        title: New title.
    """

    event_name: ClassVar[str] = "box.item.title_changed"

    box_id: BoxId
    item_id: ItemId
    title: str

    def to_payload(self) -> dict[str, Any]:
        return {
            **self.metadata_payload(),
            "box_id": self.box_id.value,
            "item_id": self.item_id.value,
            "title": self.title,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            **cls.metadata_from_payload(payload),
            box_id=BoxId(payload_int(payload, "box_id")),
            item_id=ItemId(payload_int(payload, "item_id")),
            title=payload_str(payload, "title"),
        )
