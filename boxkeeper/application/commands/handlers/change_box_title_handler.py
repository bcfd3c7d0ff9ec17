"""ChangeBoxTitle command handler.

Renames a box. Renaming to the current title succeeds without publishing.
"""

from typing import cast

from boxkeeper.application.commands.box_commands import ChangeBoxTitle
from boxkeeper.core.enums import ErrorCode
from boxkeeper.core.result import Failure, Result, Success
from boxkeeper.domain.errors import BoxError
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol


class ChangeBoxTitleHandler:
    """Handler for ChangeBoxTitle command."""

    def __init__(
        self,
        box_repo: BoxRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._box_repo = box_repo
        self._event_bus = event_bus
        self._logger = logger

    def handle(self, cmd: ChangeBoxTitle) -> Result[None, BoxError]:
        """Handle ChangeBoxTitle command.

        Returns:
            Success(None): Title changed (or already equal).
            Failure(BoxError): BOX_NOT_FOUND or INVALID_TITLE.
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

        previous_title = box.title
        try:
            box.change_title(cmd.title)
        except ValueError as e:
            return cast(
                Result[None, BoxError],
                Failure(
                    error=BoxError(
                        code=ErrorCode.INVALID_TITLE,
                        message=str(e),
                        details={"box_id": str(cmd.box_id)},
                    )
                ),
            )

        events = box.collect_events()
        if not events:
            return Success(value=None)

        self._box_repo.save(box)
        for event in events:
            self._event_bus.publish(event)

        self._logger.info(
            "box_title_changed",
            box_id=str(box.box_id),
            previous_title=previous_title,
            title=box.title,
        )
        return Success(value=None)
