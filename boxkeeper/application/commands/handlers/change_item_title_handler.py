"""ChangeItemTitle command handler."""

from typing import cast

from boxkeeper.application.commands.box_commands import ChangeItemTitle
from boxkeeper.core.enums import ErrorCode
from boxkeeper.core.result import Failure, Result, Success
from boxkeeper.domain.errors import BoxError
from boxkeeper.domain.protocols.box_repository import BoxRepository
from boxkeeper.domain.protocols.event_bus_protocol import EventBusProtocol
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol


class ChangeItemTitleHandler:
    """Handler for ChangeItemTitle command.

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

    def handle(self, cmd: ChangeItemTitle) -> Result[None, BoxError]:
        """Handle ChangeItemTitle command.

        Args:
            cmd: ChangeItemTitle command with box, item and new title.

        Returns:
            Success(None): Title changed (or already equal).
            Failure(BoxError): BOX_NOT_FOUND, ITEM_NOT_FOUND or INVALID_TITLE.
        """
        details = {"box_id": str(cmd.box_id), "item_id": str(cmd.item_id)}

        box = self._box_repo.find_by_id(cmd.box_id)
        if box is None:
            return self._failure(ErrorCode.BOX_NOT_FOUND, "Box not found", details)

        try:
            box.change_item_title(cmd.item_id, cmd.title)
        except KeyError:
            return self._failure(ErrorCode.ITEM_NOT_FOUND, "Item not found in box", details)
        except ValueError as e:
            return self._failure(ErrorCode.INVALID_TITLE, str(e), details)

        events = box.collect_events()
        if not events:
            return Success(value=None)

        self._box_repo.save(box)
        for event in events:
            self._event_bus.publish(event)

        self._logger.info("item_title_changed", title=cmd.title.strip(), **details)
        return Success(value=None)

    @staticmethod
    def _failure(
        code: ErrorCode, message: str, details: dict[str, str]
    ) -> Result[None, BoxError]:
        return cast(
            Result[None, BoxError],
            Failure(error=BoxError(code=code, message=message, details=details)),
        )
