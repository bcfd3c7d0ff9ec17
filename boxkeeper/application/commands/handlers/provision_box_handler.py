"""ProvisionBox command handler.

Creates a box under a freshly generated, unused BoxId and registers it.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, events) and core
- Uses Result types for error handling
- Publishes BoxProvisioned only after the repository accepted the box
"""

from typing import cast

from boxkeeper.application.commands.box_commands import ProvisionBox
from boxkeeper.application.services.unique_id_service import UniqueIdService
from boxkeeper.core.enums import ErrorCode
from boxkeeper.core.result import Failure, Result, Success
from boxkeeper.domain.entities.box import Box
from boxkeeper.domain.errors import BoxError, BoxkeeperError
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.domain.value_objects.identifiers import BoxId


class ProvisionBoxHandler:
    """Handler for ProvisionBox command.

    Dependencies (injected via constructor):
        - BoxRepository: For persistence
        - UniqueIdService[BoxId]: For identifier generation
        - EventBusProtocol: For domain events
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        box_repo: BoxRepository,
        box_ids: UniqueIdService[BoxId],
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            box_repo: Box repository.
            box_ids: Unique BoxId source.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._box_repo = box_repo
        self._box_ids = box_ids
        self._event_bus = event_bus
        self._logger = logger

    def handle(self, cmd: ProvisionBox) -> Result[Box, BoxError]:
        """Handle ProvisionBox command.

        Args:
            cmd: ProvisionBox command with optional title.

        Returns:
            Success(Box): Box created and registered.
            Failure(BoxError): Title invalid, identifier generation failed, or
                the identifier was registered concurrently.

        Side Effects:
            - Adds the box to the repository
            - Publishes BoxProvisioned (on success)
        """
        try:
            box_id = self._box_ids.next_unique_id()
            box = Box.provision(box_id, cmd.title)
            self._box_repo.add(box)
        except BoxkeeperError as e:
            self._logger.warning(
                "box_provisioning_failed",
                error_code=e.code.value,
                error_message=str(e),
            )
            return cast(Result[Box, BoxError], Failure(error=BoxError.from_exception(e)))
        except ValueError as e:
            return cast(
                Result[Box, BoxError],
                Failure(error=BoxError(code=ErrorCode.INVALID_TITLE, message=str(e))),
            )

        for event in box.collect_events():
            self._event_bus.publish(event)

        self._logger.info("box_provisioned", box_id=str(box.box_id), title=box.title)
        return Success(value=box)
