import contextlib
import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core.config_loader import DatabaseConfig
from database.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns one engine and its session factory.

    Built once per process (web app) or per run (batch job) and passed to
    whatever needs sessions. Sessions keep attribute values after commit so
    records can be returned from a closed unit of work.
    """

    def __init__(self, url: str, engine: Optional[Engine] = None, **engine_kwargs):
        self.url = url
        self.engine = engine if engine is not None else create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "Database":
        return cls(config.url, pool_pre_ping=config.pool_pre_ping, echo=config.echo)

    def get_session(self) -> Generator[Session, None, None]:
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    @contextlib.contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Provide a transactional scope around a series of operations."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def reconnect(self) -> None:
        """Drop every pooled connection; the next checkout opens a fresh one."""
        logger.warning("Disposing database connection pool")
        self.engine.dispose()

    def create_all(self) -> None:
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
