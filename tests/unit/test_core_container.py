"""Unit tests for the composition root.

Tests cover:
- build_app_context wiring (in-memory and sql)
- Registry-driven logging subscriptions
- Unsupported adapter names
- Independent contexts (no shared singletons)
"""

from unittest.mock import MagicMock, patch

import pytest

from boxkeeper.application.commands.box_commands import ProvisionBox, ProvisionItem
from boxkeeper.core.config import Settings
from boxkeeper.core.container import (
    build_app_context,
    create_box_repository,
    create_event_bus,
    get_logger,
)
from boxkeeper.core.enums import Environment
from boxkeeper.core.result import Success
from boxkeeper.domain.events.registry import EVENT_REGISTRY
from boxkeeper.domain.value_objects.identifiers import BoxId
from boxkeeper.infrastructure.identifiers import SequenceIdentifierGenerator
from boxkeeper.infrastructure.persistence.repositories import (
    InMemoryBoxRepository,
    SqlBoxRepository,
)


def make_settings(**overrides) -> Settings:
    values = {"environment": Environment.TESTING, "log_level": "WARNING"} | overrides
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() adapter selection."""

    def test_console_adapter_from_settings(self):
        settings = make_settings(log_level="ERROR")

        with patch(
            "boxkeeper.infrastructure.logging.console_adapter.ConsoleAdapter.from_settings"
        ) as mock_from_settings:
            logger = get_logger(settings)

        mock_from_settings.assert_called_once_with(settings)
        assert logger is mock_from_settings.return_value


@pytest.mark.unit
class TestFactories:
    """Test individual factories."""

    def test_in_memory_repository(self):
        repository, session = create_box_repository(make_settings())

        assert isinstance(repository, InMemoryBoxRepository)
        assert session is None

    def test_sql_repository_requires_database(self):
        with pytest.raises(ValueError):
            create_box_repository(make_settings(repository_type="sql"))

    def test_unsupported_repository_type(self):
        settings = Settings.model_construct(repository_type="redis")

        with pytest.raises(ValueError, match="Unsupported REPOSITORY_TYPE"):
            create_box_repository(settings)

    def test_unsupported_event_bus_type(self):
        settings = Settings.model_construct(event_bus_type="kafka")

        with pytest.raises(ValueError, match="Unsupported EVENT_BUS_TYPE"):
            create_event_bus(settings, MagicMock())

    def test_logging_handler_subscribed_to_every_registered_event(self):
        transport, _, subscriptions = create_event_bus(make_settings(), MagicMock())

        assert len(subscriptions) == len(EVENT_REGISTRY)
        for meta in EVENT_REGISTRY:
            assert transport.subscription_count(meta.name) == 1


@pytest.mark.unit
class TestBuildAppContext:
    """Test the fully wired graph."""

    def test_in_memory_end_to_end(self):
        # Arrange
        ctx = build_app_context(
            make_settings(), id_generator=SequenceIdentifierGenerator(1, 2, 3)
        )

        # Act
        box = ctx.provision_box.handle(ProvisionBox(title="Inbox"))
        item = ctx.provision_item.handle(ProvisionItem(box_id=BoxId(1), title="Milk"))

        # Assert
        assert isinstance(box, Success)
        assert isinstance(item, Success)
        assert ctx.repository.find_by_id(BoxId(1)).items == [item.value]
        assert ctx.box_ids.max_attempts == 100
        ctx.close()

    def test_uses_configured_max_attempts(self):
        ctx = build_app_context(make_settings(id_max_attempts=3))

        assert ctx.box_ids.max_attempts == 3
        assert ctx.item_ids.max_attempts == 3
        ctx.close()

    def test_contexts_are_independent(self):
        first = build_app_context(make_settings(), id_generator=SequenceIdentifierGenerator(1))
        second = build_app_context(make_settings(), id_generator=SequenceIdentifierGenerator(1))

        first.provision_box.handle(ProvisionBox())

        assert first.repository is not second.repository
        assert second.repository.list_all() == []
        assert isinstance(second.provision_box.handle(ProvisionBox()), Success)
        first.close()
        second.close()

    def test_close_disposes_container_subscriptions(self):
        ctx = build_app_context(make_settings())

        ctx.close()

        assert all(not s.is_active for s in ctx.subscriptions)
        for meta in EVENT_REGISTRY:
            assert ctx.transport.subscription_count(meta.name) == 0

    def test_sql_context(self):
        # Arrange
        settings = make_settings(repository_type="sql")

        # Act
        with build_app_context(settings, id_generator=SequenceIdentifierGenerator(5)) as ctx:
            result = ctx.provision_box.handle(ProvisionBox(title="Stored"))
            ctx.commit()

            # Assert
            assert isinstance(ctx.repository, SqlBoxRepository)
            assert isinstance(result, Success)
            assert ctx.repository.find_by_id(BoxId(5)).title == "Stored"
