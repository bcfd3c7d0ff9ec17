"""Box repository factory."""

from typing import TYPE_CHECKING

from boxkeeper.core.config import Settings

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from boxkeeper.domain.protocols.box_repository import BoxRepository
    from boxkeeper.infrastructure.persistence.database import Database


def create_box_repository(
    settings: Settings, database: "Database | None" = None
) -> tuple["BoxRepository", "Session | None"]:
    """Create the box repository selected by REPOSITORY_TYPE.

    Returns correct adapter based on REPOSITORY_TYPE:
        - 'in-memory': InMemoryBoxRepository
        - 'sql': SqlBoxRepository on a new session from ``database``

    Args:
        settings: Application settings.
        database: Required for 'sql'.

    Returns:
        Repository and the session it writes to (None for in-memory). The
        caller owns the session and commits it.

    Raises:
        ValueError: Unsupported repository type, or 'sql' without database.
    """
    if settings.repository_type == "in-memory":
        from boxkeeper.infrastructure.persistence.repositories import (
            InMemoryBoxRepository,
        )

        return InMemoryBoxRepository(), None

    if settings.repository_type == "sql":
        from boxkeeper.infrastructure.persistence.repositories import SqlBoxRepository

        if database is None:
            raise ValueError("REPOSITORY_TYPE 'sql' requires a database")
        session = database.session_factory()
        return SqlBoxRepository(session), session

    raise ValueError(
        f"Unsupported REPOSITORY_TYPE: {settings.repository_type}. "
        f"Supported: 'in-memory', 'sql'"
    )
