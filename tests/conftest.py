"""Shared pytest fixtures.

Every test builds its own collaborators; nothing is shared between tests
except the cached settings, which are cleared around each test.
"""

from unittest.mock import MagicMock

import pytest

from boxkeeper.application.services.unique_id_service import UniqueIdService
from boxkeeper.core.config import get_settings
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId
from boxkeeper.infrastructure.events import InMemoryEnvelopeTransport, TypedEventBus
from boxkeeper.infrastructure.identifiers import SequenceIdentifierGenerator
from boxkeeper.infrastructure.persistence.repositories import InMemoryBoxRepository


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording every call."""
    return MagicMock()


@pytest.fixture
def transport(mock_logger) -> InMemoryEnvelopeTransport:
    return InMemoryEnvelopeTransport(logger=mock_logger)


@pytest.fixture
def event_bus(transport, mock_logger) -> TypedEventBus:
    return TypedEventBus(transport=transport, logger=mock_logger)


@pytest.fixture
def repository() -> InMemoryBoxRepository:
    return InMemoryBoxRepository()


def make_id_services(
    repository: InMemoryBoxRepository,
    logger: MagicMock,
    first: int = 1,
    *rest: int,
    max_attempts: int = 100,
) -> tuple[UniqueIdService[BoxId], UniqueIdService[ItemId]]:
    """Helper to create box/item id services over one sequence generator.

    Args:
        repository: Store answering the "is taken" checks.
        logger: Logger double.
        first, *rest: Programmed candidates (the last one repeats).
        max_attempts: Retry limit for both services.

    Returns:
        (box_ids, item_ids)
    """
    generator = SequenceIdentifierGenerator(first, *rest)
    box_ids = UniqueIdService(
        generator=generator,
        is_taken=repository.box_id_taken,
        identifier_type=BoxId,
        logger=logger,
        max_attempts=max_attempts,
    )
    item_ids = UniqueIdService(
        generator=generator,
        is_taken=repository.item_id_taken,
        identifier_type=ItemId,
        logger=logger,
        max_attempts=max_attempts,
    )
    return box_ids, item_ids
