"""Box commands (CQRS write operations)."""

from boxkeeper.application.commands.box_commands import (
    ChangeBoxTitle,
    ChangeItemTitle,
    ProvisionBox,
    ProvisionItem,
    RemoveBox,
    RemoveItem,
)

__all__ = [
    "ChangeBoxTitle",
    "ChangeItemTitle",
    "ProvisionBox",
    "ProvisionItem",
    "RemoveBox",
    "RemoveItem",
]
