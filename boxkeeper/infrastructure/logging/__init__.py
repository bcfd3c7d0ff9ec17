"""Logging adapters."""

from boxkeeper.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = [
    "ConsoleAdapter",
]
