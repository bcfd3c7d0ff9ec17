"""Unit tests for BoxTreeProjection.

Drives the projection through real handlers and a real in-memory bus, so
the tests exercise the whole publish path (handler -> bus -> transport ->
decode -> projection).
"""

import pytest

from boxkeeper.application.commands.box_commands import (
    ChangeBoxTitle,
    ChangeItemTitle,
    ProvisionBox,
    ProvisionItem,
    RemoveBox,
    RemoveItem,
)
from boxkeeper.application.commands.handlers import (
    ChangeBoxTitleHandler,
    ChangeItemTitleHandler,
    ProvisionBoxHandler,
    ProvisionItemHandler,
    RemoveBoxHandler,
    RemoveItemHandler,
)
from boxkeeper.application.event_handlers import BoxTreeProjection
from boxkeeper.domain.events import BoxProvisioned
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId
from boxkeeper.infrastructure.events import QueueExecutionContext
from tests.conftest import make_id_services


@pytest.fixture
def handlers(repository, event_bus, mock_logger):
    box_ids, item_ids = make_id_services(repository, mock_logger, 1, 2, 3, 4, 5, 6)
    return {
        "provision_box": ProvisionBoxHandler(repository, box_ids, event_bus, mock_logger),
        "provision_item": ProvisionItemHandler(repository, item_ids, event_bus, mock_logger),
        "remove_box": RemoveBoxHandler(repository, event_bus, mock_logger),
        "remove_item": RemoveItemHandler(repository, event_bus, mock_logger),
        "change_box_title": ChangeBoxTitleHandler(repository, event_bus, mock_logger),
        "change_item_title": ChangeItemTitleHandler(repository, event_bus, mock_logger),
    }


@pytest.mark.unit
class TestBoxTreeProjection:
    """Test the read model."""

    def test_mirrors_boxes_and_items_in_order(self, event_bus, handlers):
        # Arrange
        tree = BoxTreeProjection(event_bus)

        # Act
        first = handlers["provision_box"].handle(ProvisionBox(title="Inbox")).value
        second = handlers["provision_box"].handle(ProvisionBox(title="Later")).value
        milk = handlers["provision_item"].handle(
            ProvisionItem(box_id=first.box_id, title="Milk")
        ).value
        eggs = handlers["provision_item"].handle(
            ProvisionItem(box_id=first.box_id, title="Eggs")
        ).value

        # Assert
        assert tree.boxes() == [first.box_id, second.box_id]
        assert tree.items(first.box_id) == [milk.item_id, eggs.item_id]
        assert tree.items(second.box_id) == []
        assert tree.title_of(first.box_id) == "Inbox"
        assert tree.title_of(first.box_id, eggs.item_id) == "Eggs"

    def test_follows_renames_and_removals(self, event_bus, handlers):
        # Arrange
        tree = BoxTreeProjection(event_bus)
        box = handlers["provision_box"].handle(ProvisionBox(title="Inbox")).value
        item = handlers["provision_item"].handle(ProvisionItem(box_id=box.box_id)).value
        other = handlers["provision_item"].handle(ProvisionItem(box_id=box.box_id)).value

        # Act
        handlers["change_box_title"].handle(ChangeBoxTitle(box_id=box.box_id, title="Done"))
        handlers["change_item_title"].handle(
            ChangeItemTitle(box_id=box.box_id, item_id=item.item_id, title="Bread")
        )
        handlers["remove_item"].handle(RemoveItem(box_id=box.box_id, item_id=other.item_id))

        # Assert
        assert tree.title_of(box.box_id) == "Done"
        assert tree.title_of(box.box_id, item.item_id) == "Bread"
        assert tree.items(box.box_id) == [item.item_id]

    def test_box_removal_covers_items(self, event_bus, handlers):
        tree = BoxTreeProjection(event_bus)
        box = handlers["provision_box"].handle(ProvisionBox()).value
        handlers["provision_item"].handle(ProvisionItem(box_id=box.box_id))

        handlers["remove_box"].handle(RemoveBox(box_id=box.box_id))

        assert tree.boxes() == []
        assert tree.items(box.box_id) == []

    def test_unknown_lookups_return_none(self, event_bus):
        tree = BoxTreeProjection(event_bus)

        assert tree.title_of(BoxId(1)) is None
        assert tree.title_of(BoxId(1), ItemId(1)) is None

    def test_close_stops_updates(self, event_bus, transport, handlers):
        # Arrange
        tree = BoxTreeProjection(event_bus)

        # Act
        tree.close()
        tree.close()
        handlers["provision_box"].handle(ProvisionBox())

        # Assert
        assert tree.boxes() == []
        assert all(not s.is_active for s in tree.subscriptions)
        assert transport.subscription_count(BoxProvisioned.event_name) == 0

    def test_context_manager_closes(self, event_bus, handlers):
        with BoxTreeProjection(event_bus) as tree:
            handlers["provision_box"].handle(ProvisionBox())
            assert len(tree.boxes()) == 1

        handlers["provision_box"].handle(ProvisionBox())
        assert len(tree.boxes()) == 1

    def test_deferred_context(self, event_bus, handlers):
        context = QueueExecutionContext()
        tree = BoxTreeProjection(event_bus, context=context)

        handlers["provision_box"].handle(ProvisionBox())
        assert tree.boxes() == []

        context.run_pending()
        assert len(tree.boxes()) == 1
