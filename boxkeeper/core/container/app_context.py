"""Application context (composition root).

``build_app_context`` wires the whole object graph from settings:

    settings -> logger -> repository -> transport/event bus
             -> identifier generator -> box/item UniqueIdService
             -> six command handlers

Usage:
    >>> ctx = build_app_context()
    >>> result = ctx.provision_box.handle(ProvisionBox(title="Inbox"))
    >>> ctx.commit()
    >>> ctx.close()
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from boxkeeper.application.commands.handlers import (
    ChangeBoxTitleHandler,
    ChangeItemTitleHandler,
    ProvisionBoxHandler,
    ProvisionItemHandler,
    RemoveBoxHandler,
    RemoveItemHandler,
)
from boxkeeper.application.services.unique_id_service import UniqueIdService
from boxkeeper.core.config import Settings, get_settings
from boxkeeper.core.container.events import create_event_bus
from boxkeeper.core.container.infrastructure import create_database, get_logger
from boxkeeper.core.container.repositories import create_box_repository
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.envelope_transport_protocol import (
    EnvelopeTransportProtocol,
)
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.domain.protocols.subscription_protocol import SubscriptionProtocol
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId
from boxkeeper.infrastructure.identifiers import RandomIdentifierGenerator

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from boxkeeper.infrastructure.persistence.database import Database


@dataclass
class AppContext:
    """Fully wired application object graph.

    Attributes:
        settings: Settings the graph was built from.
        logger: Shared structured logger.
        repository: Box repository adapter.
        transport: Envelope transport under the event bus.
        event_bus: Typed event bus.
        box_ids: Unique BoxId source.
        item_ids: Unique ItemId source.
        provision_box ... change_item_title: Command handlers.
        database: Database (sql repository only).
        session: Session the sql repository writes to.
        subscriptions: Container-owned subscriptions, disposed by ``close``.
    """

    settings: Settings
    logger: LoggerProtocol
    repository: BoxRepository
    transport: EnvelopeTransportProtocol
    event_bus: EventBusProtocol
    box_ids: UniqueIdService[BoxId]
    item_ids: UniqueIdService[ItemId]
    provision_box: ProvisionBoxHandler
    provision_item: ProvisionItemHandler
    remove_box: RemoveBoxHandler
    remove_item: RemoveItemHandler
    change_box_title: ChangeBoxTitleHandler
    change_item_title: ChangeItemTitleHandler
    database: "Database | None" = None
    session: "Session | None" = None
    subscriptions: list[SubscriptionProtocol] = field(default_factory=list)

    def commit(self) -> None:
        """Commit pending repository writes (no-op for in-memory)."""
        if self.session is not None:
            self.session.commit()

    def close(self) -> None:
        """Dispose container subscriptions and release database resources.

        Uncommitted sql writes are discarded.
        """
        for subscription in self.subscriptions:
            subscription.dispose()
        if self.session is not None:
            self.session.close()
        if self.database is not None:
            self.database.close()

    def __enter__(self) -> "AppContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def build_app_context(
    settings: Settings | None = None,
    *,
    id_generator: IdentifierGeneratorProtocol | None = None,
) -> AppContext:
    """Build an independent application context.

    Args:
        settings: Settings to use (default: cached ``get_settings()``).
        id_generator: Identifier source shared by boxes and items
            (default: RandomIdentifierGenerator).

    Returns:
        AppContext with every collaborator wired.

    Raises:
        ValueError: Unsupported repository or event bus type.
    """
    settings = settings or get_settings()
    logger = get_logger(settings)

    database = create_database(settings) if settings.repository_type == "sql" else None
    repository, session = create_box_repository(settings, database)
    transport, event_bus, subscriptions = create_event_bus(settings, logger)

    generator = id_generator or RandomIdentifierGenerator()
    box_ids = UniqueIdService(
        generator=generator,
        is_taken=repository.box_id_taken,
        identifier_type=BoxId,
        logger=logger,
        max_attempts=settings.id_max_attempts,
    )
    item_ids = UniqueIdService(
        generator=generator,
        is_taken=repository.item_id_taken,
        identifier_type=ItemId,
        logger=logger,
        max_attempts=settings.id_max_attempts,
    )

    logger.info(
        "app_context_built",
        repository_type=settings.repository_type,
        event_bus_type=settings.event_bus_type,
        environment=settings.environment.value,
    )

    return AppContext(
        settings=settings,
        logger=logger,
        repository=repository,
        transport=transport,
        event_bus=event_bus,
        box_ids=box_ids,
        item_ids=item_ids,
        provision_box=ProvisionBoxHandler(repository, box_ids, event_bus, logger),
        provision_item=ProvisionItemHandler(repository, item_ids, event_bus, logger),
        remove_box=RemoveBoxHandler(repository, event_bus, logger),
        remove_item=RemoveItemHandler(repository, event_bus, logger),
        change_box_title=ChangeBoxTitleHandler(repository, event_bus, logger),
        change_item_title=ChangeItemTitleHandler(repository, event_bus, logger),
        database=database,
        session=session,
        subscriptions=subscriptions,
    )
