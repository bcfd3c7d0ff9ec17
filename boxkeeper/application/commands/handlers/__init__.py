"""Command handlers for box and item operations."""

from boxkeeper.application.commands.handlers.change_box_title_handler import (
    ChangeBoxTitleHandler,
)
from boxkeeper.application.commands.handlers.change_item_title_handler import (
    ChangeItemTitleHandler,
)
from boxkeeper.application.commands.handlers.provision_box_handler import (
    ProvisionBoxHandler,
)
from boxkeeper.application.commands.handlers.provision_item_handler import (
    ProvisionItemHandler,
)
from boxkeeper.application.commands.handlers.remove_box_handler import (
    RemoveBoxHandler,
)
from boxkeeper.application.commands.handlers.remove_item_handler import (
    RemoveItemHandler,
)

__all__ = [
    "ChangeBoxTitleHandler",
    "ChangeItemTitleHandler",
    "ProvisionBoxHandler",
    "ProvisionItemHandler",
    "RemoveBoxHandler",
    "RemoveItemHandler",
]
