# app/db/session.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def resolve_database_url() -> str:
    """DATABASE_URL wins; otherwise DB_HOST selects MariaDB; otherwise a local SQLite file."""
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    if settings.DB_HOST:
        return URL.create(
            "mysql+pymysql",
            username=settings.DB_USER,
            password=settings.DB_PASSWORD or None,
            host=settings.DB_HOST,
            database=settings.DB_NAME,
        ).render_as_string(hide_password=False)
    logger.warning("DATABASE_URL / DB_HOST not set; using SQLite")
    return "sqlite:///./calmora.db"


def build_engine(url: str) -> Engine:
    engine_kwargs: Dict[str, Any] = dict(pool_pre_ping=True)
    connect_args: Dict[str, Any] = {}

    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if url in ("sqlite://", "sqlite:///:memory:"):
            # a single shared connection, otherwise every checkout sees an empty db
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update({
            "pool_size": 10,
            "max_overflow": 0,
            "pool_timeout": 30,
            "pool_recycle": 1800,
        })

    return create_engine(url, connect_args=connect_args, echo=False, **engine_kwargs)


DATABASE_URL = resolve_database_url()
engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()


def query(sql: str, params: Optional[Dict[str, Any]] = None, bind: Optional[Engine] = None) -> List[Dict[str, Any]]:
    """Run one parameterized statement on a pooled connection.

    The connection goes back to the pool whether the statement succeeds or
    not. Statements that return no rows yield an empty list.
    """
    try:
        with (bind or engine).begin() as conn:
            result = conn.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]
    except SQLAlchemyError as e:
        logger.error("Database query error: %s", e)
        raise DatabaseError() from e


def check_connection(bind: Optional[Engine] = None) -> bool:
    try:
        query("SELECT 1", bind=bind)
        return True
    except DatabaseError:
        return False
