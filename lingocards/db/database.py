import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE is off by default in SQLite
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the SQLAlchemy engine and hands out sessions.

    PostgreSQL in deployment. SQLite URLs are accepted for local runs and
    tests; an in-memory SQLite URL shares one connection across sessions.
    """

    def __init__(self, database_url: str, echo: bool = False):
        url = make_url(database_url)
        engine_kwargs = {"echo": echo}
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(url, **engine_kwargs)
        if url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        # Keep returned rows readable after commit
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def startup(self) -> None:
        """Verify that the database answers."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info(f"Connected to {self.dialect} database")

    def create_tables(self) -> None:
        """Create all tables directly. Deployments use Alembic migrations instead."""
        import lingocards.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def health_check(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def teardown(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
