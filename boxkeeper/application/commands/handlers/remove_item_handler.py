"""RemoveItem command handler."""

from typing import cast

from boxkeeper.application.commands.box_commands import RemoveItem
from boxkeeper.core.enums import ErrorCode
from boxkeeper.core.result import Failure, Result, Success
from boxkeeper.domain.errors import BoxError
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol


class RemoveItemError:
    """RemoveItem-specific error messages."""

    BOX_NOT_FOUND = "Box not found"
    ITEM_NOT_FOUND = "Item not found in box"


class RemoveItemHandler:
    """Handler for RemoveItem command.

    Dependencies (injected via constructor):
        - BoxRepository: For persistence
        - EventBusProtocol: For domain events
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        box_repo: BoxRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._box_repo = box_repo
        self._event_bus = event_bus
        self._logger = logger

    def handle(self, cmd: RemoveItem) -> Result[None, BoxError]:
        """Handle RemoveItem command.

        Args:
            cmd: RemoveItem command with owning box and item.

        Returns:
            Success(None): Item removed and box saved.
            Failure(BoxError): BOX_NOT_FOUND or ITEM_NOT_FOUND.

        Side Effects:
            - Saves the box without the item
            - Publishes ItemRemoved (on success)
        """
        details = {"box_id": str(cmd.box_id), "item_id": str(cmd.item_id)}

        box = self._box_repo.find_by_id(cmd.box_id)
        if box is None:
            return cast(
                Result[None, BoxError],
                Failure(
                    error=BoxError(
                        code=ErrorCode.BOX_NOT_FOUND,
                        message=RemoveItemError.BOX_NOT_FOUND,
                        details=details,
                    )
                ),
            )

        try:
            box.remove_item(cmd.item_id)
        except KeyError:
            return cast(
                Result[None, BoxError],
                Failure(
                    error=BoxError(
                        code=ErrorCode.ITEM_NOT_FOUND,
                        message=RemoveItemError.ITEM_NOT_FOUND,
                        details=details,
                    )
                ),
            )

        self._box_repo.save(box)
        for event in box.collect_events():
            self._event_bus.publish(event)

        self._logger.info("item_removed", **details)
        return Success(value=None)
