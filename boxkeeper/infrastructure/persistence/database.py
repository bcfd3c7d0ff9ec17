"""Database connection and session management.

Provides a SQLAlchemy engine and sessions to repository implementations.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides sessions to repository implementations
- Handles transaction boundaries
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite:///boxes.db")
        db.create_all()
        with db.get_session() as session:
            repo = SqlBoxRepository(session)
            repo.add(box)
            # Automatically commits on success, rolls back on error
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: SQLAlchemy URL (e.g., sqlite:///boxes.db).
            echo: If True, log all SQL statements.
        """
        engine_kwargs: dict = {"echo": echo}
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.engine: Engine = create_engine(database_url, **engine_kwargs)
        if database_url.startswith("sqlite"):
            event.listen(self.engine, "connect", _sqlite_on_connect)
            event.listen(self.engine, "begin", _sqlite_on_begin)
        self.session_factory = sessionmaker(self.engine, expire_on_commit=False)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Provide a transactional database session.

        Commits on successful exit, rolls back on exception, always closes.

        Yields:
            Session: Database session for operations.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        """Create all tables defined in the models.

        There are no migrations; tables are created on startup.
        """
        from boxkeeper.infrastructure.persistence import models  # noqa: F401
        from boxkeeper.infrastructure.persistence.base import BaseModel

        BaseModel.metadata.create_all(self.engine)

    def drop_all(self) -> None:
        """Drop all tables defined in the models. Deletes all data."""
        from boxkeeper.infrastructure.persistence.base import BaseModel

        BaseModel.metadata.drop_all(self.engine)

    def close(self) -> None:
        """Close all database connections."""
        self.engine.dispose()

    def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception:
            return False


def _sqlite_on_connect(dbapi_connection, _connection_record) -> None:
    # pysqlite manages BEGIN itself and breaks SAVEPOINT; hand control to SQLAlchemy
    dbapi_connection.isolation_level = None


def _sqlite_on_begin(connection) -> None:
    connection.exec_driver_sql("BEGIN")
