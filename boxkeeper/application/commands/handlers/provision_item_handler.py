"""ProvisionItem command handler.

Creates an item inside an existing box. The box is resolved first, so no
identifier is drawn for a box that does not exist.
"""

from typing import cast

from boxkeeper.application.commands.box_commands import ProvisionItem
from boxkeeper.application.services.unique_id_service import UniqueIdService
from boxkeeper.core.enums import ErrorCode
from boxkeeper.core.result import Failure, Result, Success
from boxkeeper.domain.entities.item import Item
from boxkeeper.domain.errors import BoxError, BoxkeeperError
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.domain.value_objects.identifiers import ItemId


class ProvisionItemHandler:
    """Handler for ProvisionItem command.

    Dependencies (injected via constructor):
        - BoxRepository: For persistence
        - UniqueIdService[ItemId]: For identifier generation
        - EventBusProtocol: For domain events
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        box_repo: BoxRepository,
        item_ids: UniqueIdService[ItemId],
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._box_repo = box_repo
        self._item_ids = item_ids
        self._event_bus = event_bus
        self._logger = logger

    def handle(self, cmd: ProvisionItem) -> Result[Item, BoxError]:
        """Handle ProvisionItem command.

        Args:
            cmd: ProvisionItem command with target box and optional title.

        Returns:
            Success(Item): Item created and saved with its box.
            Failure(BoxError): Box not found, title invalid, or identifier
                generation/registration failed.

        Side Effects:
            - Saves the box with the new item
            - Publishes ItemProvisioned (on success)
        """
        box = self._box_repo.find_by_id(cmd.box_id)
        if box is None:
            return cast(
                Result[Item, BoxError],
                Failure(
                    error=BoxError(
                        code=ErrorCode.BOX_NOT_FOUND,
                        message="Box not found",
                        details={"box_id": str(cmd.box_id)},
                    )
                ),
            )

        try:
            item_id = self._item_ids.next_unique_id()
            item = box.add_item(item_id, cmd.title)
        except BoxkeeperError as e:
            return self._failed(cmd, e)
        except ValueError as e:
            return cast(
                Result[Item, BoxError],
                Failure(error=BoxError(code=ErrorCode.INVALID_TITLE, message=str(e))),
            )

        try:
            self._box_repo.save(box)
        except BoxkeeperError as e:
            # Repositories may hand out the stored instance; undo the add
            box.items.remove(item)
            box.collect_events()
            return self._failed(cmd, e)

        for event in box.collect_events():
            self._event_bus.publish(event)

        self._logger.info(
            "item_provisioned",
            box_id=str(box.box_id),
            item_id=str(item.item_id),
            title=item.title,
        )
        return Success(value=item)

    def _failed(self, cmd: ProvisionItem, e: BoxkeeperError) -> Result[Item, BoxError]:
        self._logger.warning(
            "item_provisioning_failed",
            box_id=str(cmd.box_id),
            error_code=e.code.value,
            error_message=str(e),
        )
        return cast(
            Result[Item, BoxError],
            Failure(error=BoxError.from_exception(e, details={"box_id": str(cmd.box_id)})),
        )
