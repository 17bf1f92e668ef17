import logging

from sqlalchemy import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from app.models.games import Game  # noqa: F401  registers the games table

logger = logging.getLogger(__name__)


class StorageUnavailableError(RuntimeError):
    """Raised when the database cannot be reached at startup."""


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create the engine for ``url``.

    SQLite connections are shared across FastAPI's worker threads, and an
    in-memory database keeps a single connection so every session sees the
    same data.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(url, echo=echo, pool_pre_ping=True, pool_recycle=3600)


def create_db_and_tables(engine: Engine) -> None:
    """Check connectivity and create missing tables."""
    try:
        with engine.connect():
            pass
        SQLModel.metadata.create_all(engine)
    except OperationalError as e:
        logger.critical("Could not connect to the database: %s", e)
        raise StorageUnavailableError(str(e)) from e
    logger.info("Connected to the database")
