"""SQLite database engine and schema via SQLAlchemy Core."""

from subsctl.infrastructure.database.engine import create_db_engine, init_database
from subsctl.infrastructure.database.schema import metadata, subscriptions

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "subscriptions",
]
