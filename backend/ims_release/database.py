"""
Database Setup
SQLAlchemy engine, session factory and declarative base
"""

import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from ims_release.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def create_db_engine(url: str, **engine_kwargs) -> Engine:
    """
    Create an engine for the given URL

    SQLite connections are shared with the FastAPI threadpool and get
    foreign key enforcement switched on.
    """
    connect_args = {"check_same_thread": False} if _is_sqlite(url) else {}
    db_engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True, **engine_kwargs)

    if _is_sqlite(url):
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = create_db_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency yielding a session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(db_engine: Engine = None):
    """Create all tables that do not exist yet"""
    db_engine = db_engine or engine

    url = db_engine.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    # Register models on the metadata
    import ims_release.models  # noqa: F401

    Base.metadata.create_all(bind=db_engine)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")
