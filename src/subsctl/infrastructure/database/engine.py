"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used because subsctl is a short-lived
CLI process and the entity is a frozen pydantic model, so there is no
benefit from session management or identity maps.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from subsctl.infrastructure.database.schema import metadata

logger = logging.getLogger(__name__)


def create_db_engine(db_path: Path, *, echo: bool = False) -> Engine:
    """Create a SQLite engine with WAL mode enabled."""
    url = f"sqlite:///{db_path}"
    engine = create_engine(url, echo=echo)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(db_path: Path, *, echo: bool = False) -> Engine:
    """Create the parent directory and all tables for *db_path*.

    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path, echo=echo)
    metadata.create_all(engine)
    logger.debug("Initialized database at %s", db_path)
    return engine
