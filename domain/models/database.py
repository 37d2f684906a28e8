"""
Database configuration and session management.

The engine (and its connection pool) is process-scoped: built once during
application startup, kept on ``app.state`` and disposed at shutdown.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import Settings

logger = logging.getLogger("elainediet.database")

# Create SQLAlchemy Base
Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine described by settings"""
    kwargs = {"echo": settings.db_echo, "future": True, "pool_pre_ping": True}
    if settings.is_postgres():
        kwargs["pool_size"] = settings.db_pool_size
        if settings.db_sslmode:
            kwargs["connect_args"] = {"sslmode": settings.db_sslmode}
    elif settings.database_url.startswith("sqlite"):
        # Sessions are used from the request threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(settings.database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine"""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


def init_database(engine: Engine):
    """Initialize database schema (CREATE TABLE IF NOT EXISTS semantics)"""
    # Import models so they register on Base.metadata
    from domain.models import meal_record  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Table meal_records ready")
