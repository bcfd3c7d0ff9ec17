"""RemoveBox command handler.

Removes a box and, with it, all of its items. Only BoxRemoved is published;
subscribers treat it as covering the box's items.
"""

from typing import cast

from boxkeeper.application.commands.box_commands import RemoveBox
from boxkeeper.core.enums import ErrorCode
from boxkeeper.core.result import Failure, Result, Success
from boxkeeper.domain.errors import BoxError
from boxkeeper.domain.events.box_events import BoxRemoved
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol


class RemoveBoxHandler:
    """Handler for RemoveBox command."""

    def __init__(
        self,
        box_repo: BoxRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._box_repo = box_repo
        self._event_bus = event_bus
        self._logger = logger

    def handle(self, cmd: RemoveBox) -> Result[None, BoxError]:
        """Handle RemoveBox command.

        Returns:
            Success(None): Box removed.
            Failure(BoxError): BOX_NOT_FOUND.
        """
        box = self._box_repo.find_by_id(cmd.box_id)
        if box is None:
            return cast(
                Result[None, BoxError],
                Failure(
                    error=BoxError(
                        code=ErrorCode.BOX_NOT_FOUND,
                        message="Box not found",
                        details={"box_id": str(cmd.box_id)},
                    )
                ),
            )

        self._box_repo.remove(cmd.box_id)
        self._event_bus.publish(BoxRemoved(box_id=cmd.box_id))

        self._logger.info(
            "box_removed", box_id=str(cmd.box_id), item_count=len(box.items)
        )
        return Success(value=None)
