"""Registry Compliance Tests - FAIL FAST on drift.

These tests verify EVENT_REGISTRY stays the single source of truth:
- Every concrete event class is registered
- Routing names are unique and non-empty
- Name lookups resolve to the registered class
"""

import pytest

from boxkeeper.domain.events import box_events
from boxkeeper.domain.events.base_event import DomainEvent
from boxkeeper.domain.events.registry import (
    EVENT_REGISTRY,
    EventCategory,
    get_all_events,
    get_event_type,
    get_events_by_category,
)


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify registry is complete and accurate."""

    def test_registry_not_empty(self):
        assert len(EVENT_REGISTRY) > 0, "Registry is empty!"

    def test_all_event_classes_registered(self):
        """Every DomainEvent defined in box_events must be registered."""
        defined = {
            obj
            for obj in vars(box_events).values()
            if isinstance(obj, type) and issubclass(obj, DomainEvent) and obj is not DomainEvent
        }

        assert defined == set(get_all_events())

    def test_all_events_have_metadata(self):
        for meta in EVENT_REGISTRY:
            assert meta.event_class is not None, "Event class missing"
            assert meta.category is not None, "Category missing"
            assert meta.description, "Description empty"
            assert meta.name, f"{meta.event_class.__name__} has no event_name"


@pytest.mark.unit
class TestRegistryNames:
    """Verify routing names."""

    def test_names_are_unique(self):
        names = [meta.name for meta in EVENT_REGISTRY]

        duplicates = {n for n in names if names.count(n) > 1}
        assert not duplicates, f"Duplicate event names: {sorted(duplicates)}"

    def test_get_event_type_resolves_every_name(self):
        for meta in EVENT_REGISTRY:
            assert get_event_type(meta.name) is meta.event_class

    def test_get_event_type_unknown_name(self):
        with pytest.raises(KeyError):
            get_event_type("box.exploded")

    def test_categories_partition_registry(self):
        box_events_ = get_events_by_category(EventCategory.BOX)
        item_events = get_events_by_category(EventCategory.ITEM)

        assert len(box_events_) + len(item_events) == len(EVENT_REGISTRY)
        assert all(cls.event_name.startswith("box.item.") for cls in item_events)
