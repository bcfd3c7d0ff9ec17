"""Infrastructure event handlers."""

from boxkeeper.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = [
    "LoggingEventHandler",
]
