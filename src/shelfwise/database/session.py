"""
Connection handling for the Shelfwise snapshot store.

The store is opened twice per server run, to load the library at startup and
to save it at shutdown, plus once per ``shelfwise-db`` command.
``DatabaseManager`` owns the engine for it; each load or save runs in its own
``session_scope()``.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from ..config import get_config
from .schema import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """Engine for the snapshot store; SQLite shares one connection across threads."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    engine = create_engine(
        database_url,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class DatabaseManager:
    """Engine lifecycle and transactional sessions for one snapshot store."""

    def __init__(self, database_url: str | None = None):
        self.database_url = database_url or get_config().get_database_url()
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = build_engine(self.database_url)
            logger.info("Opened snapshot store %s", self._engine.url)
        return self._engine

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Run a load or save in one transaction.

        ```python
        with db_manager.session_scope() as session:
            SnapshotRepository(session).save(library.snapshot())
        ```
        """
        session = Session(self.engine, autoflush=False, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            logger.exception("Snapshot store transaction failed, rolling back")
            session.rollback()
            raise
        finally:
            session.close()

    def init_database(self, drop_existing: bool = False) -> None:
        """Create the snapshot tables, dropping them first if asked to."""
        if drop_existing:
            logger.warning("Dropping saved library tables")
            Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    def verify_connection(self) -> bool:
        """Return True if the store answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Snapshot store is unreachable")
            return False
        return True

    def close(self) -> None:
        """Dispose of the engine. Safe to call more than once."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
