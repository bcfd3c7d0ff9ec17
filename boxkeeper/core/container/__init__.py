"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from boxkeeper.core.container import build_app_context, get_logger

The container is organized into modules by concern:
- infrastructure: Logger and database
- repositories: Box repository selection
- events: Transport, event bus and logging subscriptions
- app_context: AppContext, the fully wired object graph

There are no process-wide singletons besides the cached settings; every
call to ``build_app_context`` returns an independent graph.
"""

from boxkeeper.core.container.app_context import AppContext, build_app_context
from boxkeeper.core.container.events import create_event_bus
from boxkeeper.core.container.infrastructure import create_database, get_logger
from boxkeeper.core.container.repositories import create_box_repository

__all__ = [
    "AppContext",
    "build_app_context",
    "create_box_repository",
    "create_database",
    "create_event_bus",
    "get_logger",
]
