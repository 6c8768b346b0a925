# todoapp/core/database.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from todoapp.core.exceptions import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)

Base = declarative_base()


def normalize_url(url: str) -> str:
    # Convert old‐style “postgres://” URIs if necessary:
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Database:
    """
    Owns the SQLAlchemy engine and session factory for one process.

    Built once at application startup and disposed at shutdown; nothing in
    the package holds a module-level connection.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = normalize_url(url)
        try:
            parsed = make_url(self.url)
            if parsed.get_backend_name() == "sqlite":
                engine_kwargs = {"connect_args": {"check_same_thread": False}}
                if parsed.database in (None, "", ":memory:"):
                    # one shared connection, otherwise every session sees an empty database
                    engine_kwargs["poolclass"] = StaticPool
            else:
                engine_kwargs = {
                    "pool_size":     10,
                    "max_overflow":  20,
                    "pool_pre_ping": True,
                    "pool_recycle":  3600,
                }
            self.engine = create_engine(self.url, echo=echo, **engine_kwargs)
        except (ArgumentError, ImportError) as e:
            raise ConfigurationError(f"Unusable DATABASE_URL: {e}") from e

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def connect(self) -> None:
        """Check connectivity and create missing tables."""
        import todoapp.db.models  # noqa: F401  (populates Base.metadata)

        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"❌ Database unreachable at {self.engine.url!r}: {e}")
            raise DatabaseConnectionError(f"Could not connect to database: {e}") from e
        logger.info("✅ Database connection OK")

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"⚠️  Database ping failed: {e}")
            return False

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Context‐manager for SQLAlchemy sessions.
        Use like:
            with database.session() as db:
                ...
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections released")
