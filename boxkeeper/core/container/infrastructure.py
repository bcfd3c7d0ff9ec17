"""Infrastructure factories: logger and database.

Adapter selection is centralized here (composition root). Callers pass the
settings explicitly so tests can build isolated graphs.
"""

from typing import TYPE_CHECKING

from boxkeeper.core.config import Settings

if TYPE_CHECKING:
    from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
    from boxkeeper.infrastructure.persistence.database import Database


def get_logger(settings: Settings) -> "LoggerProtocol":
    """Return the application logger (ConsoleAdapter bound to ``app``).

    Args:
        settings: Application settings (environment, log_level).

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from boxkeeper.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter.from_settings(settings)


def create_database(settings: Settings) -> "Database":
    """Create the database and its tables.

    Args:
        settings: Application settings (database_url, db_echo).

    Returns:
        Database with all tables created.
    """
    from boxkeeper.infrastructure.persistence.database import Database

    database = Database(database_url=settings.database_url, echo=settings.db_echo)
    database.create_all()
    return database
