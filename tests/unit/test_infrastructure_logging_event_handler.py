"""Unit tests for LoggingEventHandler."""

from unittest.mock import MagicMock

import pytest

from boxkeeper.domain.events import ItemProvisioned
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId
from boxkeeper.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured log output for domain events."""

    def test_logs_event_at_info_with_payload(self):
        # Arrange
        logger = MagicMock()
        handler = LoggingEventHandler(logger=logger)
        event = ItemProvisioned(box_id=BoxId(1), item_id=ItemId(10), title="Milk")

        # Act
        handler.handle(event)

        # Assert
        logger.info.assert_called_once()
        call = logger.info.call_args
        assert call[0][0] == "box.item.provisioned"
        assert call.kwargs["event_type"] == "ItemProvisioned"
        assert call.kwargs["event_id"] == str(event.event_id)
        assert call.kwargs["box_id"] == 1
        assert call.kwargs["item_id"] == 10
        assert call.kwargs["title"] == "Milk"
