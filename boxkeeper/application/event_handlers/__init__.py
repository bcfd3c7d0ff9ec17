"""Event handlers (read models) built on the event bus."""

from boxkeeper.application.event_handlers.box_tree_projection import (
    BoxTreeProjection,
)

__all__ = ["BoxTreeProjection"]
