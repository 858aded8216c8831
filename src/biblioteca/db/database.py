"""Database connection and session management.

The ``Database`` object owns the one engine/session factory used for the
whole process. It is built explicitly, handed to every operation that needs
storage, and closed once at the end.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from loguru import logger
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..errors import PersistenceError
from ..log import route_sql_logging
from .models import Base


class Database:
    """Database connection and session manager."""

    def __init__(self, url: str, echo: bool = False):
        """Record connection settings. Nothing is built until ``open()``.

        Args:
            url: SQLAlchemy database URL, e.g. ``sqlite:///books.db``.
            echo: Log every SQL statement issued by the engine through
                loguru (stderr), never on stdout.
        """
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker[Session]] = None

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise PersistenceError("Database is not open")
        return self._engine

    def open(self) -> None:
        """Build the engine and session factory, then create the schema.

        Calling this on an already open database does nothing.

        Raises:
            PersistenceError: If the URL is invalid, the driver is missing or
                the store cannot be reached.
        """
        if self._engine is not None:
            return

        route_sql_logging(self.echo)

        try:
            engine = self._create_engine()
            # Fail now rather than on the first operation
            with engine.connect():
                pass
            Base.metadata.create_all(engine)
        except Exception as e:
            logger.error("Could not open database {}: {}", self.url, e)
            raise PersistenceError(f"Could not build the session factory: {e}") from e

        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )
        logger.info("Opened database {}", engine.url.render_as_string(hide_password=True))

    def _create_engine(self) -> Engine:
        url = make_url(self.url)

        # In-memory SQLite must share a single connection or every session
        # would see its own empty database
        if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )

        if url.get_backend_name() == "sqlite":
            Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

        return create_engine(url)

    def close(self) -> None:
        """Dispose of the engine. The database cannot be used afterwards."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Closed database {}", self.url)

    def create_tables(self) -> None:
        """Create all database tables."""
        Base.metadata.create_all(self.engine)

    def drop_tables(self) -> None:
        """Drop all database tables. Use with caution!"""
        Base.metadata.drop_all(self.engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Open a unit of work bound to the shared session factory.

        The session is always closed. If the body raises, whatever
        transaction is still open is rolled back first.
        """
        if self._session_factory is None:
            raise PersistenceError("Database is not open")

        session = self._session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
